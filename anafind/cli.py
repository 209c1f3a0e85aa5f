import logging
from typing import Optional
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from anafind.core.models import QueryOptions
from anafind.core.signature import Signature
from anafind.errors import SetupError
from anafind.words.bank import WordIndex

DEFAULT_WORDS_FILE = "/usr/share/dict/words"

app = typer.Typer(help="anafind: find the words hidden in a set of letters.")
console = Console()

WordsOption = typer.Option(
    DEFAULT_WORDS_FILE, "--words", "-w",
    envvar="ANAFIND_WORDS",
    help="Word list, one word per line",
)

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

@app.command()
def find(
    pattern: str = typer.Argument(..., help="Letters available to build words from"),
    length: Optional[int] = typer.Option(None, "--length", "-l", help="Output words of this length"),
    min_length: int = typer.Option(3, "--min-length", "-m", help="Minimum length of output words"),
    match: Optional[str] = typer.Option(None, "--match", "-p", help="A pattern to match, '.' for any letter"),
    words_file: str = WordsOption,
    table: bool = typer.Option(False, "--table", help="Show results as a table"),
):
    """
    Lists every dictionary word that can be made from the letters of PATTERN.
    """
    try:
        options = QueryOptions(length=length, min_length=min_length, pattern=match)
    except ValidationError as e:
        console.print(f"[red]Error: invalid options: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)

    index = _load_index(words_file)
    found = index.query(pattern, options)

    if table:
        _print_table(pattern, found)
    else:
        for word in found:
            typer.echo(word)

@app.command()
def anagrams(
    word: str = typer.Argument(..., help="Word to rearrange"),
    words_file: str = WordsOption,
):
    """
    Lists the words that use exactly the letters of WORD.
    """
    index = _load_index(words_file)
    for found in sorted(index.anagrams(word)):
        typer.echo(found)

@app.command()
def signature(word: str = typer.Argument(..., help="Word to fingerprint")):
    """
    Prints the letter signature of WORD.
    """
    typer.echo(str(Signature.for_word(word)))

def _load_index(words_file: str) -> WordIndex:
    try:
        return WordIndex.from_file(words_file)
    except SetupError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

def _print_table(pattern: str, found: list[str]):
    table = Table(title=f"Words in '{pattern}'")
    table.add_column("Word", style="cyan")
    table.add_column("Length", justify="right")
    for word in found:
        table.add_row(word, str(len(word)))
    console.print(table)
    console.print(f"{len(found)} words")

if __name__ == "__main__":
    app()
