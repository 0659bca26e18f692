"""
Meme Generator - CLI Entry Point

Try the scoring engine from a terminal without an MCP client:

    memegen-mcp suggest "I used to write tests, now I just pray"
    memegen-mcp quotes --file article.txt
    memegen-mcp search surprised
    memegen-mcp categories
    memegen-mcp meme drake "Writing tests" "Praying" --output drake.png
    memegen-mcp serve
"""

import argparse
import sys
from pathlib import Path

from rich.panel import Panel
from rich.table import Table

from .analysis import extract_key_quotes, suggest_templates
from .discovery import browse_categories, search_by_keyword
from .errors import MemeToolError
from .logging_utils import console, print_error, setup_logging
from .memegen import generate_meme


def _read_content(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return " ".join(args.text)


def _suggest(args) -> None:
    report = suggest_templates(_read_content(args), args.limit)

    table = Table(title='🎯 Template Suggestions', show_header=True, header_style='bold cyan')
    table.add_column('Template', style='cyan')
    table.add_column('Name')
    table.add_column('Slots', justify='right')
    table.add_column('Score', justify='right', style='yellow')
    table.add_column('Confidence', style='green')
    table.add_column('Reason', style='dim')
    for suggestion in report.suggestions:
        table.add_row(
            suggestion.template,
            suggestion.name,
            str(suggestion.slots),
            f"{suggestion.score:g}",
            suggestion.confidence,
            suggestion.reason,
        )
    console.print(table)

    active = [name for name, value in report.signals.to_dict().items() if value is True]
    console.print(f"[dim]Signals: {', '.join(active) or 'none'}[/dim]")


def _quotes(args) -> None:
    report = extract_key_quotes(_read_content(args), args.max_length, args.limit)

    table = Table(title='💬 Key Quotes', show_header=True, header_style='bold cyan')
    table.add_column('Quote')
    table.add_column('Score', justify='right', style='yellow')
    table.add_column('Position', style='green')
    table.add_column('Reason', style='dim')
    for quote in report.quotes:
        table.add_row(quote.text, f"{quote.score:g}", quote.position, quote.reason)
    console.print(table)
    console.print(
        f"[dim]{report.sentence_count} sentences, "
        f"average length {report.average_sentence_length} characters[/dim]"
    )


def _search(args) -> None:
    result = search_by_keyword(" ".join(args.query), args.limit)

    table = Table(title=f"🔎 Templates for '{result['query']}'", show_header=True, header_style='bold cyan')
    table.add_column('Template', style='cyan')
    table.add_column('Name')
    table.add_column('Category', style='green')
    table.add_column('Relevance', justify='right', style='yellow')
    for hit in result['results']:
        table.add_row(hit['id'], hit['name'], hit['category'], f"{hit['relevance']:.2f}")
    console.print(table)


def _categories(args) -> None:
    result = browse_categories()

    table = Table(title='📚 Meme Categories', show_header=True, header_style='bold cyan')
    table.add_column('Category', style='cyan')
    table.add_column('Name')
    table.add_column('Templates', justify='right', style='yellow')
    table.add_column('Description', style='dim')
    for category in result['categories']:
        table.add_row(category['id'], category['name'], str(category['count']), category['description'])
    console.print(table)
    console.print(f"[dim]{result['total_templates']} templates in total[/dim]")


def _meme(args) -> None:
    meme = generate_meme(args.template, args.lines)
    if args.output:
        Path(args.output).write_bytes(meme.image)
    console.print(Panel(
        f"[bold green]{meme.url}[/bold green]"
        + (f"\n[dim]Saved to {args.output}[/dim]" if args.output else ""),
        title='🖼️ Meme Generated',
        border_style='green',
    ))


def _serve(args) -> None:
    from .server import main as serve

    serve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='memegen-mcp', description='Meme generator tools')
    subparsers = parser.add_subparsers(dest='command', required=True)

    suggest = subparsers.add_parser('suggest', help='Suggest templates for some text')
    suggest.add_argument('text', nargs='*')
    suggest.add_argument('--file', help='Read the text from a file')
    suggest.add_argument('--limit', type=int, default=5)
    suggest.set_defaults(handler=_suggest)

    quotes = subparsers.add_parser('quotes', help='Extract meme-worthy quotes from text')
    quotes.add_argument('text', nargs='*')
    quotes.add_argument('--file', help='Read the text from a file')
    quotes.add_argument('--max-length', type=int, default=100)
    quotes.add_argument('--limit', type=int, default=10)
    quotes.set_defaults(handler=_quotes)

    search = subparsers.add_parser('search', help='Search templates by keyword')
    search.add_argument('query', nargs='+')
    search.add_argument('--limit', type=int, default=10)
    search.set_defaults(handler=_search)

    categories = subparsers.add_parser('categories', help='List meme categories')
    categories.set_defaults(handler=_categories)

    meme = subparsers.add_parser('meme', help='Render a meme through memegen.link')
    meme.add_argument('template')
    meme.add_argument('lines', nargs='+', help='One text line per template slot')
    meme.add_argument('--output', help='Save the PNG to this path')
    meme.set_defaults(handler=_meme)

    serve = subparsers.add_parser('serve', help='Run the MCP server (transport from MCP_TRANSPORT)')
    serve.set_defaults(handler=_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging()
    try:
        args.handler(args)
    except MemeToolError as e:
        print_error(e.kind.replace('_', ' ').title(), str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
