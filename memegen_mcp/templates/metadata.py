"""
Semantic metadata for every template in the catalog.

Usage descriptions, categories, and keyword lists drive the keyword search and
the template suggester. Keywords are matched case-insensitively, both as whole
query terms and as substrings of free-form content, so very short keywords are
avoided.
"""

from dataclasses import dataclass
from enum import Enum

from ..errors import ConsistencyError


class Category(str, Enum):
    REACTIONS = "reactions"
    COMPARISONS = "comparisons"
    SOCIAL = "social"
    QUESTIONING = "questioning"
    SUCCESS_FAIL = "success-fail"
    STATEMENTS = "statements"
    NARRATIVE = "narrative"
    META = "meta"
    CHARACTERS = "characters"


POPULARITY_LEVELS = ("high", "medium", "low")


@dataclass(frozen=True)
class TemplateMetadata:
    id: str
    usage: str
    category: Category
    keywords: tuple[str, ...]
    popularity: str | None = None
    similar: tuple[str, ...] = ()


def _meta(template_id, category, usage, keywords, popularity=None, similar=()):
    return TemplateMetadata(
        id=template_id,
        usage=usage,
        category=category,
        keywords=tuple(keywords),
        popularity=popularity,
        similar=tuple(similar),
    )


_R = Category.REACTIONS
_C = Category.COMPARISONS
_S = Category.SOCIAL
_Q = Category.QUESTIONING
_SF = Category.SUCCESS_FAIL
_ST = Category.STATEMENTS
_N = Category.NARRATIVE
_M = Category.META
_CH = Category.CHARACTERS

_ENTRIES = [
    # --- Reactions ---
    _meta("fine", _R,
          "Pretending everything is okay while chaos unfolds around you",
          ["fine", "chaos", "denial", "disaster", "burning", "ignoring problems", "calm"],
          "high", ["disastergirl", "panik-kalm-panik", "harold"]),
    _meta("harold", _R,
          "Smiling through pain or hiding discomfort behind a forced smile",
          ["pain", "hiding pain", "forced smile", "suffering", "coping", "uncomfortable"],
          "high", ["fine", "sadfrog"]),
    _meta("feelsgood", _R,
          "Satisfaction and contentment after something goes right",
          ["feels good", "satisfaction", "satisfied", "happy", "relief", "content"],
          "medium", ["success", "sadfrog"]),
    _meta("sadfrog", _R,
          "Disappointment or melancholy about a small misfortune",
          ["sad", "feels bad", "disappointed", "disappointment", "melancholy", "bummer"],
          "medium", ["feelsgood", "blb"]),
    _meta("grumpycat", _R,
          "A grumpy, negative, or cynical reaction to something others enjoy",
          ["grumpy", "annoyed", "cynical", "negative", "hate", "refuse"],
          "medium", ["sadfrog"]),
    _meta("facepalm", _R,
          "Exasperation at something obviously dumb",
          ["facepalm", "dumb", "stupid", "exasperated", "embarrassing mistake", "disbelief"],
          "medium", ["crazypills", "bad"]),
    _meta("astronaut", _R,
          "Revealing that something surprising was always true all along",
          ["always has been", "revelation", "realization", "surprised", "ironic", "plot twist", "wait it's all"],
          "high", ["scc", "reveal", "morpheus"]),
    _meta("scc", _R,
          "A sudden realization or epiphany about something obvious",
          ["realization", "epiphany", "clarity", "sudden", "insight", "surprised"],
          "medium", ["astronaut", "rollsafe"]),
    _meta("whatyear", _R,
          "Being out of touch, or surprised by how much time has passed",
          ["what year", "out of touch", "time passed", "surprised", "outdated", "asleep"],
          "low", ["gandalf", "older"]),
    _meta("gandalf", _R,
          "Not remembering something, or being confused about your own past",
          ["confused", "forgot", "memory", "don't remember", "no memory", "surprised"],
          "medium", ["noidea", "whatyear"]),
    _meta("disastergirl", _R,
          "Smug satisfaction while chaos you caused unfolds in the background",
          ["disaster", "chaos", "smug", "burning", "evil", "caused it"],
          "high", ["fine"]),
    _meta("cheems", _R,
          "A lazy, weak, or pathetic version of something",
          ["lazy", "weak", "low effort", "pathetic", "cheems"],
          "low", ["pooh", "stonks"]),
    _meta("stop-it", _R,
          "Telling someone their behavior is ridiculous and needs to stop",
          ["stop it", "get some help", "ridiculous", "unhinged", "too far"],
          "low", ["bad", "facepalm"]),
    _meta("ams", _R,
          "Capturing the moment something becomes awkward",
          ["awkward moment", "uncomfortable", "awkward silence", "cringe", "wave back"],
          "medium", ["awkward", "harold"]),

    # --- Comparisons ---
    _meta("drake", _C,
          "Rejecting one thing in favor of another; top panel rejects, bottom panel approves",
          ["prefer", "preference", "reject", "rejecting", "choose", "better", "instead", "versus", "approve"],
          "high", ["pooh", "glasses", "db"]),
    _meta("db", _C,
          "Being tempted or distracted by something new while ignoring the current thing",
          ["distracted", "distraction", "tempted", "temptation", "new thing", "jealous", "cheating", "ignoring"],
          "high", ["drake", "exit"]),
    _meta("pooh", _C,
          "Contrasting a basic version of something with a fancy, sophisticated version",
          ["fancy", "sophisticated", "classy", "basic", "upgrade", "elegant", "better"],
          "high", ["drake", "glasses"]),
    _meta("glasses", _C,
          "Seeing things blurry at first and sharp once you take a new perspective",
          ["glasses", "blurry", "new perspective", "finally see", "before and after"],
          "medium", ["pooh", "drake"]),
    _meta("both", _C,
          "Refusing to choose between two options and taking both",
          ["both", "why not both", "choose", "choice", "can't decide", "indecisive"],
          "medium", ["ds", "drake"]),
    _meta("same", _C,
          "Pointing out that two supposedly different things are identical",
          ["same", "same picture", "identical", "no difference", "equivalent", "corporate"],
          "high", ["spiderman"]),
    _meta("spiderman", _C,
          "Two people or things accusing each other of being the same",
          ["pointing", "accusing", "same", "copy", "duplicate", "hypocrite"],
          "medium", ["same"]),
    _meta("exit", _C,
          "Swerving away from the sensible option at the last second",
          ["exit", "swerve", "last minute", "choice", "off ramp", "bad decision", "choose"],
          "high", ["db", "ds"]),
    _meta("ds", _C,
          "Sweating over a difficult choice between two options",
          ["two buttons", "difficult choice", "dilemma", "decision", "sweating", "struggle", "choose"],
          "high", ["both", "exit"]),
    _meta("handshake", _C,
          "Two different groups agreeing on one shared thing",
          ["handshake", "agree", "agreement", "common ground", "both sides", "unite"],
          "medium", ["same"]),
    _meta("midwit", _C,
          "Simpletons and geniuses agreeing while the average person overthinks",
          ["midwit", "overthinking", "genius", "bell curve", "simple answer"],
          "medium", ["gb"]),
    _meta("stonks", _C,
          "Celebrating a financially or logically dubious decision as a win",
          ["stonks", "stocks", "profit", "investment", "bad logic", "ironic"],
          "high", ["rollsafe", "boat"]),
    _meta("woman-cat", _C,
          "An angry accusation met with a confused, indifferent response",
          ["yelling", "argument", "angry", "accusation", "confused cat", "misunderstanding"],
          "high", ["chair", "spiderman"]),

    # --- Social ---
    _meta("awkward", _S,
          "A socially awkward moment or misstep",
          ["awkward", "socially awkward", "cringe", "embarrassing", "introvert", "social anxiety"],
          "high", ["ams", "awkward-awesome"]),
    _meta("awesome", _S,
          "Nailing a social interaction effortlessly",
          ["socially awesome", "smooth", "charming", "nailed it", "confident"],
          "low", ["awkward-awesome"]),
    _meta("awkward-awesome", _S,
          "A social moment that starts awkward but ends awesome",
          ["awkward awesome", "recovery", "saved it", "turned it around"],
          "low", ["awkward", "awesome"]),
    _meta("ggg", _S,
          "Someone doing something unexpectedly kind or considerate",
          ["good guy", "kind", "generous", "helpful", "wholesome", "considerate"],
          "medium", ["ss"]),
    _meta("ss", _S,
          "Someone behaving selfishly or rudely",
          ["scumbag", "selfish", "rude", "jerk", "inconsiderate"],
          "medium", ["ggg", "sb"]),
    _meta("afraid", _S,
          "Not knowing something everyone assumes you already know",
          ["afraid to ask", "don't know", "embarrassed", "pretend", "too late to ask"],
          "medium", ["noidea"]),
    _meta("hipster", _S,
          "Liking something before it was cool or mainstream",
          ["hipster", "before it was cool", "mainstream", "indie", "pretentious"],
          "low", ["wonka"]),
    _meta("sb", _S,
          "Your own brain sabotaging you at the worst moment",
          ["scumbag brain", "sabotage", "insomnia", "overthinking", "intrusive thought"],
          "medium", ["ss"]),
    _meta("fa", _S,
          "Loneliness or doing everything alone",
          ["forever alone", "lonely", "single", "alone", "no friends"],
          "low", ["sadfrog"]),

    # --- Questioning ---
    _meta("fry", _Q,
          "Being unable to decide between two possibilities; suspicious uncertainty",
          ["not sure", "not sure if", "uncertain", "unsure", "suspicious", "squint", "doubt", "confused"],
          "high", ["philosoraptor", "noidea", "pigeon"]),
    _meta("keanu", _Q,
          "A mind-blown conspiracy theory or paranoid question",
          ["conspiracy", "what if", "mind blown", "paranoid", "theory"],
          "medium", ["philosoraptor", "aag"]),
    _meta("philosoraptor", _Q,
          "Pondering a deep or silly philosophical question",
          ["philosophical", "ponder", "deep thought", "existential", "wonder"],
          "medium", ["keanu", "fry"]),
    _meta("noidea", _Q,
          "Confidently doing something without any understanding of it",
          ["no idea", "clueless", "winging it", "confused", "don't understand"],
          "medium", ["fry", "afraid"]),
    _meta("wonka", _Q,
          "Sarcastically questioning someone's claim or achievement",
          ["condescending", "sarcastic", "sarcasm", "tell me more", "patronizing"],
          "high", ["spongebob", "hipster"]),
    _meta("pigeon", _Q,
          "Completely misidentifying or misunderstanding something obvious",
          ["is this a", "misidentify", "misidentification", "mistaken", "confused", "wrong", "misunderstand"],
          "high", ["fry", "noidea"]),
    _meta("rollsafe", _Q,
          "Flawed logic presented as if it were clever",
          ["roll safe", "clever", "think about it", "big brain", "loophole", "smart"],
          "high", ["stonks", "gb"]),
    _meta("inigo", _Q,
          "Someone using a word that doesn't mean what they think",
          ["that word", "keep using", "does not mean", "misuse", "definition"],
          "low", ["dwight"]),
    _meta("yuno", _Q,
          "A frustrated demand asking why something won't happen",
          ["why", "y u no", "frustrated", "demand", "won't work"],
          "medium", ["crazypills"]),
    _meta("toohigh", _Q,
          "Complaining that a price or number is far too high",
          ["too damn high", "expensive", "price", "cost", "rent"],
          "low", ["fwp"]),
    _meta("crazypills", _Q,
          "Disbelief that nobody else sees an obvious problem",
          ["crazy pills", "disbelief", "am i the only one", "insane", "nobody notices"],
          "low", ["facepalm", "yuno"]),

    # --- Success & Failure ---
    _meta("success", _SF,
          "Celebrating a small victory or achievement",
          ["success", "win", "victory", "achievement", "nailed it", "small win"],
          "high", ["feelsgood", "blb"]),
    _meta("blb", _SF,
          "Things going wrong through sheer bad luck",
          ["bad luck", "unlucky", "fail", "misfortune", "worst luck"],
          "high", ["success", "sadfrog"]),
    _meta("iw", _SF,
          "Doing something recklessly insane with total confidence",
          ["insanity", "reckless", "insane", "extreme", "yolo"],
          "medium", ["disastergirl"]),
    _meta("boat", _SF,
          "Feeling rich after a tiny windfall",
          ["buy a boat", "rich", "windfall", "bonus", "money"],
          "low", ["stonks"]),
    _meta("aag", _SF,
          "Attributing something unexplained to an absurd cause",
          ["aliens", "unexplained", "conspiracy", "absurd explanation", "i'm not saying"],
          "medium", ["keanu"]),
    _meta("jetpack", _SF,
          "Leaving because there is nothing left to do",
          ["nothing to do", "done here", "escape", "jetpack", "leave"],
          "low", ["success"]),
    _meta("bender", _SF,
          "Being rejected and deciding to build your own, better version",
          ["build my own", "own version", "blackjack", "excluded", "rejected"],
          "low", ["drake"]),
    _meta("mw", _SF,
          "Guaranteeing that someone will like the result",
          ["guarantee", "promise", "gonna like", "satisfaction guaranteed"],
          "low", ["success"]),

    # --- Statements ---
    _meta("cmm", _ST,
          "Stating a hot take, controversial opinion, or bold claim",
          ["change my mind", "hot take", "opinion", "unpopular opinion", "controversial", "debate"],
          "high", ["morpheus", "dwight"]),
    _meta("sparta", _ST,
          "Emphatically declaring something with excessive force",
          ["sparta", "madness", "emphatic", "shouting", "declaration"],
          "medium", ["captain"]),
    _meta("mordor", _ST,
          "Pointing out that something is much harder than it sounds",
          ["one does not simply", "difficult", "impossible", "harder than it looks"],
          "high", ["ackbar"]),
    _meta("morpheus", _ST,
          "Revealing a surprising truth or correcting a misconception",
          ["what if i told you", "truth", "misconception", "mind blown", "reveal"],
          "high", ["astronaut", "cmm"]),
    _meta("dwight", _ST,
          "Pedantically correcting someone with a blunt fact",
          ["false", "fact", "correction", "pedantic", "actually"],
          "medium", ["inigo", "cmm"]),
    _meta("ackbar", _ST,
          "Warning that an offer or situation is a trap",
          ["trap", "warning", "suspicious offer", "too good to be true"],
          "medium", ["mordor", "winter"]),
    _meta("captain", _ST,
          "Taking control of a situation",
          ["captain", "take over", "in charge", "control", "takeover"],
          "low", ["sparta"]),
    _meta("fetch", _ST,
          "Telling someone their trend isn't going to catch on",
          ["fetch", "trend", "not going to happen", "stop trying"],
          "low", ["hipster"]),
    _meta("imsorry", _ST,
          "A sarcastic apology asserting entitlement",
          ["i'm sorry", "thought this was", "sarcastic apology", "entitlement"],
          "low", ["wonka"]),
    _meta("bad", _ST,
          "Shaming someone for a bad idea or behavior",
          ["feel bad", "shame", "bad idea", "disappointed in you"],
          "low", ["stop-it"]),

    # --- Narrative ---
    _meta("gru", _N,
          "A plan that backfires in the last step; the last two panels repeat",
          ["plan", "backfire", "steps", "unexpected consequence", "turn out", "goes wrong"],
          "high", ["panik-kalm-panik", "reveal"]),
    _meta("chair", _N,
          "An escalating heated argument between two sides",
          ["argument", "debate", "yelling", "heated", "disagree", "throwing chair"],
          "medium", ["woman-cat"]),
    _meta("reveal", _N,
          "Unmasking something to reveal its true nature",
          ["reveal", "unmask", "true identity", "really is", "disguise"],
          "medium", ["astronaut", "morpheus"]),
    _meta("gb", _N,
          "Increasingly absurd ideas presented as increasingly enlightened",
          ["galaxy brain", "expanding brain", "enlightened", "escalation", "big brain"],
          "high", ["midwit", "rollsafe"]),
    _meta("panik-kalm-panik", _N,
          "Panic, then relief, then renewed panic",
          ["panic", "panik", "kalm", "relief", "calm", "anxiety"],
          "high", ["fine", "gru"]),
    _meta("ptj", _N,
          "Patiently teaching something that still gets garbled",
          ["teaching", "explaining", "misunderstood", "repeat after me", "learning"],
          "low", ["chair"]),
    _meta("captain-america", _N,
          "Growing tension in an uncomfortable shared space",
          ["elevator", "confrontation", "tension", "standoff"],
          "low", ["ams"]),
    _meta("drowning", _N,
          "Giving attention to the new thing while the old one is neglected",
          ["drowning", "neglected", "forgotten", "skeleton", "ignored"],
          "low", ["db"]),

    # --- Meta ---
    _meta("older", _M,
          "Accepting something outdated because it still works",
          ["older code", "checks out", "outdated", "legacy"],
          "low", ["whatyear"]),
    _meta("xy", _M,
          "Enthusiastically wanting to do something to everything",
          ["all the things", "enthusiasm", "everything", "excited"],
          "medium", ["doge"]),
    _meta("doge", _M,
          "Such wow, very meme: broken-English exclamations",
          ["doge", "such wow", "very wow", "shiba", "broken english"],
          "high", ["xy"]),
    _meta("yodawg", _M,
          "Recursive or self-referential situations",
          ["yo dawg", "recursion", "recursive", "nested", "inception", "self-referential"],
          "medium", ["xy"]),
    _meta("mb", _M,
          "Nostalgia for how things were in the old days",
          ["member berries", "nostalgia", "remember when", "old days", "throwback"],
          "low", ["older"]),
    _meta("jd", _M,
          "Rephrasing modern slang in needlessly archaic language",
          ["archaic", "fancy words", "rephrase", "old english"],
          "low", ["pooh"]),

    # --- Characters ---
    _meta("kermit", _CH,
          "A passive-aggressive observation followed by feigned indifference",
          ["none of my business", "passive aggressive", "sipping tea", "throwing shade"],
          "high", ["wonka"]),
    _meta("spongebob", _CH,
          "Mocking or repeating something in a sarcastic tone",
          ["mocking", "mock", "sarcastic repetition", "spongebob", "imitating"],
          "high", ["wonka"]),
    _meta("patrick", _CH,
          "An absurdly simple solution to a complex problem",
          ["push it somewhere else", "simple solution", "move it", "patrick"],
          "low", ["rollsafe"]),
    _meta("michael-scott", _CH,
          "Dramatic, horrified denial",
          ["no god please", "horrified", "dramatic denial", "nooo"],
          "medium", ["panik-kalm-panik"]),
    _meta("interesting", _CH,
          "I don't always do X, but when I do, I do Y",
          ["i don't always", "but when i do", "interesting man", "dos equis"],
          "high", ["iw"]),
    _meta("dragon", _CH,
          "A single blunt wish or demand stated by a dragon",
          ["dragon", "wish", "demand", "single wish"],
          "low", ["yuno"]),
    _meta("winter", _CH,
          "Warning that something inevitable is about to arrive",
          ["brace yourselves", "is coming", "incoming", "prepare", "winter"],
          "medium", ["ackbar"]),
    _meta("fwp", _CH,
          "Complaining about a trivial, privileged inconvenience",
          ["first world problem", "privileged", "minor inconvenience", "complain"],
          "medium", ["toohigh"]),
    _meta("aint-got-time", _CH,
          "Dismissing something as not worth the time",
          ["ain't nobody got time", "no time for", "can't be bothered", "busy"],
          "medium", ["jetpack"]),
    _meta("officespace", _CH,
          "A passive-aggressive request from a boss",
          ["that would be great", "boss", "passive aggressive request", "if you could"],
          "medium", ["kermit"]),
    _meta("ski", _CH,
          "Warning that a choice will lead to a bad time",
          ["bad time", "gonna have a bad time", "ski instructor"],
          "low", ["ackbar", "winter"]),
]


def _build_metadata(entries) -> dict[str, TemplateMetadata]:
    metadata: dict[str, TemplateMetadata] = {}
    for entry in entries:
        if entry.id in metadata:
            raise ConsistencyError(f"Duplicate template id in metadata: {entry.id}")
        metadata[entry.id] = entry
    return metadata


template_metadata = _build_metadata(_ENTRIES)


def get_metadata(template_id: str) -> TemplateMetadata | None:
    return template_metadata.get(template_id)
