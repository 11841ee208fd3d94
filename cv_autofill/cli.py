"""CLI commands using Typer.

The CLI is the host shell around the autofill core: it loads the profile,
remembers the last options, opens the page and relays control messages.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cv_autofill import __version__
from cv_autofill.automation.dispatcher import Dispatcher
from cv_autofill.automation.messages import handle_message
from cv_autofill.automation.models import FieldName, FieldStatus, FillContext, FillOutcome
from cv_autofill.automation.orchestrator import FillOrchestrator, FixedDelaySettle
from cv_autofill.browser.html_adapter import HtmlPage
from cv_autofill.config import settings
from cv_autofill.exceptions import PageNotReadyError, ProfileLoadError
from cv_autofill.mappers.cv_text import format_cv_text
from cv_autofill.platforms import PlatformRegistry
from cv_autofill.profile.models import Profile
from cv_autofill.storage import PreferenceStore, load_profile

app = typer.Typer(
    name="cv-autofill",
    help="Fill recruiting-platform application forms from a JSON-Resume CV",
    add_completion=False,
)

console = Console()

REFRESH_HINT = "Odśwież stronę i spróbuj ponownie."


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _store() -> PreferenceStore:
    return PreferenceStore(settings.data_dir)


def _resolve_profile(cv_path: Path | None, store: PreferenceStore) -> Profile:
    path = cv_path or (Path(p) if (p := store.last_profile_path()) else None)
    if path is None:
        console.print("[red]Błąd:[/red] Najpierw wczytaj CV (--cv)")
        raise typer.Exit(1)

    try:
        profile = load_profile(path)
    except ProfileLoadError as e:
        console.print(f"[red]Błąd:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    store.remember_profile(path)
    console.print(f"[dim]CV:[/dim] {profile.display_name} ({path})")
    return profile


def _read_text_option(value: str | None) -> str | None:
    """Accept option text inline or as a path to a text file."""
    if value is None:
        return None
    path = Path(value).expanduser()
    if path.is_file():
        return path.read_text(encoding="utf-8")
    return value


def _print_fields(outcome: FillOutcome) -> None:
    table = Table(title=f"{outcome.form_type.value} fields")
    table.add_column("Field")
    table.add_column("Status")

    styles = {
        FieldStatus.FILLED: "green",
        FieldStatus.UNCHANGED: "green",
        FieldStatus.MANUAL: "yellow",
        FieldStatus.WRITE_FAILED: "red",
    }
    for result in outcome.fields:
        style = styles.get(result.status, "dim")
        status = result.status.value + (f" ({result.error})" if result.error else "")
        table.add_row(result.name.value, f"[{style}]{escape(status)}[/{style}]")
    console.print(table)


@app.command()
def detect(
    url: Annotated[str, typer.Argument(help="Application form URL")],
):
    """
    Detect which supported recruiting platform a page belongs to.

    Example:
        cv-autofill detect https://billennium.traffit.com/public/an/123
    """
    from cv_autofill.browser.playwright_adapter import PlaywrightPage

    async def run_detection() -> dict[str, Any]:
        async with PlaywrightPage(headless=True, timeout=settings.browser_timeout) as page:
            await page.navigate(url)
            return await handle_message(Dispatcher(), page, {"action": "detectForm"})

    try:
        reply = asyncio.run(run_detection())
    except PageNotReadyError as e:
        console.print(f"[red]Błąd:[/red] {e}. {REFRESH_HINT}")
        raise typer.Exit(1)

    if reply.get("detected"):
        console.print(f"[green]Wykryto formularz:[/green] {reply['formType']} na {reply['url']}")
    else:
        console.print("[yellow]Nie wykryto wspieranego formularza na tej stronie[/yellow]")


@app.command()
def fill(
    url: Annotated[str, typer.Argument(help="Application form URL")],
    cv_path: Annotated[
        Path | None, typer.Option("--cv", "-c", help="JSON-Resume file (defaults to last used)")
    ] = None,
    employment_type: Annotated[
        str | None, typer.Option("--employment-type", "-e", help="e.g. B2B, UoP")
    ] = None,
    expected_salary: Annotated[
        str | None, typer.Option("--salary", "-s", help="Expected salary")
    ] = None,
    salary_currency: Annotated[str | None, typer.Option("--currency", help="Currency")] = None,
    availability_date: Annotated[
        str | None, typer.Option("--availability", "-a", help="Availability")
    ] = None,
    notice_period: Annotated[str | None, typer.Option("--notice-period")] = None,
    cover_letter: Annotated[
        str | None, typer.Option("--cover-letter", help="Cover letter text or file path")
    ] = None,
    additional_info: Annotated[
        str | None, typer.Option("--info", help="Additional information text or file path")
    ] = None,
    remote_work: Annotated[bool | None, typer.Option("--remote/--no-remote")] = None,
    future_recruitment: Annotated[
        bool | None,
        typer.Option("--future-recruitment/--no-future-recruitment", help="Consent"),
    ] = None,
    settle_ms: Annotated[
        int | None, typer.Option("--settle-ms", help="Pause between DOM events")
    ] = None,
    keep_open: Annotated[
        bool, typer.Option("--keep-open/--close", help="Wait for you to review and submit")
    ] = True,
):
    """
    Open the form, fill it from the CV and leave it for review.

    The form is never submitted and the CV file must be attached manually.

    Example:
        cv-autofill fill https://solid.jobs/offer/123 --cv ./cv.json --salary 20000
    """
    from cv_autofill.browser.playwright_adapter import PlaywrightPage

    store = _store()
    profile = _resolve_profile(cv_path, store)
    options = store.load_options(
        employmentType=employment_type,
        expectedSalary=expected_salary,
        salaryCurrency=salary_currency,
        availabilityDate=availability_date,
        noticePeriod=notice_period,
        coverLetter=_read_text_option(cover_letter),
        additionalInfo=_read_text_option(additional_info),
        remoteWork=remote_work,
        agreeToFutureRecruitment=future_recruitment,
    )
    store.save_options(options)

    dispatcher = Dispatcher(orchestrator=FillOrchestrator(FixedDelaySettle(settle_ms)))
    message = {
        "action": "fillForm",
        "cvData": profile.model_dump(by_alias=True),
        "options": options.model_dump(by_alias=True),
    }

    async def run_fill() -> dict[str, Any]:
        async with PlaywrightPage(
            headless=settings.playwright_headless,
            slow_mo=settings.playwright_slow_mo,
            timeout=settings.browser_timeout,
        ) as page:
            await page.navigate(url)
            await dispatcher.announce(page)
            reply = await handle_message(dispatcher, page, message)
            _print_reply(reply)
            if keep_open and not settings.playwright_headless:
                console.print("[dim]Review the form, attach the CV file and submit. "
                              "Close the browser window when done.[/dim]")
                await page.wait_until_closed()
            return reply

    try:
        reply = asyncio.run(run_fill())
    except PageNotReadyError as e:
        console.print(f"[red]Błąd:[/red] {e}. {REFRESH_HINT}")
        raise typer.Exit(1)

    if not reply.get("success"):
        raise typer.Exit(1)


def _print_reply(reply: dict[str, Any]) -> None:
    style = "green" if reply.get("success") else "red"
    console.print(
        Panel(
            f"[bold {style}]{escape(reply.get('message', ''))}[/bold {style}]\n"
            f"[dim]Platform:[/dim] {reply.get('formType')}\n"
            f"[dim]Fields filled:[/dim] {reply.get('filledCount', 0)}",
            title="CV AutoFill",
        )
    )


@app.command()
def inspect(
    html_path: Annotated[Path, typer.Argument(help="Saved HTML of the application page")],
    url: Annotated[str, typer.Option("--url", "-u", help="URL the page was saved from")],
    cv_path: Annotated[
        Path | None, typer.Option("--cv", "-c", help="Also fill the snapshot from this CV")
    ] = None,
):
    """
    Detect the platform and locate fields in a saved page, offline.

    Example:
        cv-autofill inspect ./offer.html --url https://billennium.traffit.com/public/an/1
    """
    if not html_path.exists():
        console.print(f"[red]Error:[/red] File not found: {html_path}")
        raise typer.Exit(1)

    page = HtmlPage.from_file(html_path, url=url)
    dispatcher = Dispatcher(orchestrator=FillOrchestrator(FixedDelaySettle(0)))

    async def run_inspection() -> None:
        adapter = await dispatcher.find_adapter(page)
        if adapter is None:
            console.print("[yellow]Nie wykryto wspieranego formularza na tej stronie[/yellow]")
            raise typer.Exit(1)

        located = await adapter.locate(page)
        table = Table(title=f"{adapter.form_type.value} fields")
        table.add_column("Field")
        table.add_column("Element")
        for name in adapter.field_names:
            element = located.get(name)
            found = f"[green]{escape(element.describe())}[/green]" if element is not None else None
            table.add_row(name.value, found or "[dim]not found[/dim]")
        console.print(table)

        if cv_path is not None:
            profile = _resolve_profile(cv_path, _store())
            outcome = await dispatcher.fill(page, FillContext(profile=profile))
            _print_fields(outcome)
            console.print(outcome.message)

    asyncio.run(run_inspection())


@app.command()
def preview(
    platform: Annotated[str, typer.Argument(help="SOLID.jobs, Traffit or eRecruiter")],
    cv_path: Annotated[
        Path | None, typer.Option("--cv", "-c", help="JSON-Resume file (defaults to last used)")
    ] = None,
    text: Annotated[bool, typer.Option("--text", help="Print the plain-text CV only")] = False,
):
    """
    Show the values that would be written for a platform.

    Example:
        cv-autofill preview Traffit --cv ./cv.json
    """
    store = _store()
    profile = _resolve_profile(cv_path, store)

    if text:
        console.print(format_cv_text(profile), markup=False, highlight=False)
        return

    adapter = PlatformRegistry.get_adapter(platform)
    if adapter is None:
        console.print(
            f"[red]Error:[/red] Unknown platform {platform}. "
            f"Supported: {', '.join(PlatformRegistry.list_platforms())}"
        )
        raise typer.Exit(1)

    values = adapter.map_values(profile, store.load_options())
    table = Table(title=f"{adapter.form_type.value} values")
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    for name in adapter.field_names:
        value = values.get(name, "")
        shown = str(value) if name != FieldName.CV_TEXT else f"{len(str(value))} chars"
        table.add_row(name.value, escape(shown))
    console.print(table)


@app.command()
def platforms():
    """List supported platforms in detection order."""
    for position, name in enumerate(PlatformRegistry.list_platforms(), start=1):
        console.print(f"{position}. {name}")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]CV AutoFill[/bold] v{__version__}")
    console.print("Application form autofill for SOLID.jobs, Traffit and eRecruiter")


@app.command()
def info():
    """Show configuration information."""
    console.print(Panel("[bold]Configuration[/bold]", title="CV AutoFill"))
    console.print(f"  Environment: {settings.app_env.value}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Settle interval: {settings.settle_interval_ms}ms")
    console.print(f"  CV text locale: {settings.cv_locale}")
    console.print(f"  Headless browser: {settings.playwright_headless}")
    console.print(f"  State directory: {settings.data_dir}")
    last = _store().last_profile_path()
    console.print(f"  Last CV: {last or '[dim]none[/dim]'}")


if __name__ == "__main__":
    app()
