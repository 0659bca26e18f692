"""
Meme template catalog.

Each entry maps a memegen.link template id to its display name, the number of
text slots it takes, and example text for those slots.
"""

from dataclasses import dataclass

from ..errors import ConsistencyError


@dataclass(frozen=True)
class MemeTemplate:
    id: str
    name: str
    slots: int
    example: tuple[str, ...]


_ENTRIES = [
    # --- Reactions ---
    ("fine", "This Is Fine", 2, ("Production is down", "This is fine")),
    ("harold", "Hide the Pain Harold", 2, ("When the code review", "has 200 comments")),
    ("feelsgood", "Feels Good", 2, ("All tests green on the first run", "Feels good man")),
    ("sadfrog", "Feels Bad Frog", 2, ("Pizza arrives cold", "Feels bad man")),
    ("grumpycat", "Grumpy Cat", 2, ("I had fun once", "It was awful")),
    ("facepalm", "Facepalm", 2, ("Pushes to main", "Without running the tests")),
    ("astronaut", "Always Has Been", 4, ("Wait, it's all", "legacy code?", "Always has been", "")),
    ("scc", "Sudden Clarity Clarence", 2, ("If I stop writing bugs", "I won't have to fix them")),
    ("whatyear", "What Year Is It?", 2, ("Finally finished the migration", "What year is it?")),
    ("gandalf", "Confused Gandalf", 2, ("I have no memory", "of writing this code")),
    ("disastergirl", "Disaster Girl", 2, ("Deleted the database", "Told nobody")),
    ("cheems", "Cheems", 2, ("Me writing tests", "Me writing tests for tests")),
    ("stop-it", "Stop It, Get Some Help", 2, ("Nesting ternaries seven levels deep", "Stop it. Get some help.")),
    ("ams", "Awkward Moment Seal", 2, ("When you wave back", "but they were waving at someone else")),

    # --- Comparisons ---
    ("drake", "Drake Hotline Bling", 2, ("Using print debugging", "Using a proper debugger")),
    ("db", "Distracted Boyfriend", 3, ("Shiny new framework", "Me", "My current project")),
    ("pooh", "Tuxedo Winnie the Pooh", 2, ("Bug", "Undocumented behavior")),
    ("glasses", "Peter Parker's Glasses", 2, ("Reading minified code", "Reading it with source maps")),
    ("both", "Why Not Both?", 2, ("Tabs or spaces?", "Why not both?")),
    ("same", "They're The Same Picture", 3, ("Tabs", "Spaces", "They're the same picture")),
    ("spiderman", "Spider-Man Pointing at Spider-Man", 2, ("Frontend blaming backend", "Backend blaming frontend")),
    ("exit", "Left Exit 12 Off Ramp", 3, ("Writing tests", "Me", "Shipping straight to prod")),
    ("ds", "Daily Struggle", 3, ("Fix the bug", "Ship the feature", "Me on a Friday afternoon")),
    ("handshake", "Epic Handshake", 3, ("Frontend devs", "Backend devs", "Hating CSS")),
    ("midwit", "Midwit", 3, ("Just restart it", "Analyze the root cause for six hours", "Just restart it")),
    ("stonks", "Stonks", 2, ("Buying a faster laptop", "to compile slower code")),
    ("woman-cat", "Woman Yelling at a Cat", 2, ("Me explaining the bug to the compiler", "The compiler")),

    # --- Social ---
    ("awkward", "Socially Awkward Penguin", 2, ("Someone says happy birthday", "You too")),
    ("awesome", "Socially Awesome Penguin", 2, ("Remembers everyone's name", "at the party")),
    ("awkward-awesome", "Socially Awkward Awesome Penguin", 2, ("Trips in front of everyone", "turns it into a dance move")),
    ("ggg", "Good Guy Greg", 2, ("Finds your bug", "Fixes it and writes the test")),
    ("ss", "Scumbag Steve", 2, ("Borrows your charger", "Never gives it back")),
    ("afraid", "Afraid to Ask Andy", 2, ("I don't know what a monad is", "and at this point I'm too afraid to ask")),
    ("hipster", "Hipster Barista", 2, ("I used Rust", "before it was cool")),
    ("sb", "Scumbag Brain", 2, ("Time to sleep", "Remember that embarrassing thing from 2009")),
    ("fa", "Forever Alone", 2, ("Group project", "Does it alone")),

    # --- Questioning ---
    ("fry", "Futurama Fry", 2, ("Not sure if bug", "or undocumented behavior")),
    ("keanu", "Conspiracy Keanu", 2, ("What if the cloud", "is just someone else's computer?")),
    ("philosoraptor", "Philosoraptor", 2, ("If a test fails in CI", "but passes locally, did it fail?")),
    ("noidea", "I Have No Idea What I'm Doing", 2, ("Deploying Kubernetes", "I have no idea what I'm doing")),
    ("wonka", "Condescending Wonka", 2, ("Oh, you use a framework?", "Tell me more about your hello world")),
    ("pigeon", "Is This a Pigeon?", 2, ("A bug", "Is this a feature?")),
    ("rollsafe", "Roll Safe", 2, ("Can't have bugs in production", "if you never deploy")),
    ("inigo", "Inigo Montoya", 2, ("You keep using that word", "I do not think it means what you think it means")),
    ("yuno", "Y U No", 2, ("Code", "Y U no compile?")),
    ("toohigh", "The Rent Is Too Damn High", 2, ("The cloud bill", "is too damn high")),
    ("crazypills", "Am I Taking Crazy Pills?", 2, ("Nobody else sees the flaky test?", "Am I taking crazy pills?")),

    # --- Success & Failure ---
    ("success", "Success Kid", 2, ("Pushed on Friday", "Nothing broke")),
    ("blb", "Bad Luck Brian", 2, ("Finally fixes the bug", "Laptop dies before saving")),
    ("iw", "Insanity Wolf", 2, ("Does testing", "in production")),
    ("boat", "I Should Buy a Boat Cat", 2, ("Got a five dollar bonus", "I should buy a boat")),
    ("aag", "Ancient Aliens Guy", 2, ("I'm not saying it was cosmic rays", "but it was cosmic rays")),
    ("jetpack", "Nothing To Do Here", 2, ("All tickets closed", "Nothing to do here")),
    ("bender", "I'll Build My Own", 2, ("I'll build my own framework", "with blackjack and plugins")),
    ("mw", "I Guarantee It", 2, ("You're gonna like this refactor", "I guarantee it")),

    # --- Statements ---
    ("cmm", "Change My Mind", 2, ("Tabs are better than spaces", "")),
    ("sparta", "This Is Sparta!", 2, ("Code freeze?", "This is production!")),
    ("mordor", "One Does Not Simply", 2, ("One does not simply", "fix a bug without creating two more")),
    ("morpheus", "What If I Told You", 2, ("What if I told you", "the bug was in your code all along")),
    ("dwight", "Schrute Facts", 2, ("Semicolons are optional", "False.")),
    ("ackbar", "It's a Trap!", 2, ("Quick five minute fix", "It's a trap!")),
    ("captain", "I Am the Captain Now", 2, ("The intern", "I am the admin now")),
    ("fetch", "Stop Trying to Make Fetch Happen", 2, ("Stop trying to make", "blockchain happen")),
    ("imsorry", "Oh, I'm Sorry, I Thought This Was America", 2, ("Oh, I'm sorry", "I thought this was a standup")),
    ("bad", "You Should Feel Bad", 2, ("You merged without review", "You should feel bad")),

    # --- Narrative ---
    ("gru", "Gru's Plan", 4, ("Write the code", "Ship it to prod", "It breaks everything", "It breaks everything")),
    ("chair", "American Chopper Argument", 6, (
        "Tabs are better!", "Spaces are the standard!", "Tabs save bytes!",
        "Nobody counts bytes!", "Consistency matters!", "Then use a formatter!",
    )),
    ("reveal", "Scooby Doo Reveal", 4, ("The AI startup", "Let's see who this really is", "The AI startup", "An if statement")),
    ("gb", "Galaxy Brain", 4, ("Using a debugger", "Using print statements", "Using console.log", "Deleting the code")),
    ("panik-kalm-panik", "Panik Kalm Panik", 3, ("Prod is down", "It's a staging alert", "Staging points at the prod database")),
    ("ptj", "Phoebe Teaching Joey", 8, (
        "Cast it", "Cast it", "into", "into", "the fire", "the fire",
        "Cast it into the fire.", "Keep the Ring of Power!",
    )),
    ("captain-america", "Captain America Elevator", 3, ("When the standup", "runs past an hour", "and nobody says anything")),
    ("drowning", "Drowning Kid in the Pool", 3, ("New framework", "Last year's framework", "My jQuery plugin")),

    # --- Meta ---
    ("older", "An Older Code, But It Checks Out", 2, ("It's an older code, sir", "but it checks out")),
    ("xy", "X All the Y", 2, ("Refactor", "all the things!")),
    ("doge", "Doge", 2, ("Such code", "Very wow")),
    ("yodawg", "Yo Dawg", 2, ("Yo dawg, I heard you like containers", "so I put a container in your container")),
    ("mb", "Member Berries", 2, ("Member Flash games?", "Ooh, I member!")),
    ("jd", "Joseph Ducreux", 2, ("Disregard specifications", "acquire deployments")),

    # --- Characters ---
    ("kermit", "But That's None of My Business", 2, ("You wrote no tests", "but that's none of my business")),
    ("spongebob", "Mocking SpongeBob", 2, ("It works on my machine", "iT wOrKs On My MaChInE")),
    ("patrick", "Push It Somewhere Else Patrick", 2, ("We should fix the memory leak", "Why don't we just add more RAM")),
    ("michael-scott", "Michael Scott No God No", 2, ("Merge conflict in package-lock.json", "No, God! Please no!")),
    ("interesting", "The Most Interesting Man in the World", 2, ("I don't always test my code", "but when I do, I do it in production")),
    ("dragon", "Dragon", 1, ("OK I want a boyfriend",)),
    ("winter", "Brace Yourselves", 2, ("Brace yourselves", "the release is coming")),
    ("fwp", "First World Problems", 2, ("My second monitor", "is slightly dimmer than the first")),
    ("aint-got-time", "Ain't Nobody Got Time for That", 2, ("Reading the whole changelog?", "Ain't nobody got time for that")),
    ("officespace", "That Would Be Great", 2, ("If you could come in on Saturday", "that would be great")),
    ("ski", "Super Cool Ski Instructor", 2, ("If you skip code review", "you're gonna have a bad time")),
]


def _build_catalog(entries) -> dict[str, MemeTemplate]:
    catalog: dict[str, MemeTemplate] = {}
    for template_id, name, slots, example in entries:
        if template_id in catalog:
            raise ConsistencyError(f"Duplicate template id in catalog: {template_id}")
        catalog[template_id] = MemeTemplate(id=template_id, name=name, slots=slots, example=example)
    return catalog


templates = _build_catalog(_ENTRIES)


def get_template(template_id: str) -> MemeTemplate | None:
    """Get template by ID."""
    return templates.get(template_id)


def get_template_ids() -> list[str]:
    """Get all template IDs in catalog order."""
    return list(templates)


def is_valid_template(template_id: str) -> bool:
    return template_id in templates
