"""Typer-based command line interface for the trivia game.

``play`` loads the creature names, generates a game from the chosen settings
and either prints it or runs an interactive reveal loop.  ``redact`` masks a
text file against a name list, and ``generations`` lists the selectable
generations.

Exit codes
----------
0 success
3 I/O or fetch error (unreachable API, missing file, unknown extension)
4 configuration or settings error
5 pipeline error (malformed upstream record, insufficient population)
6 verification failure (strict mode with residual names > 0)
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .api.client import AiohttpPokeApi
from .config import ConfigModel, load_config
from .game.controller import GameController
from .game.generations import GENERATIONS, parse_generation
from .game.generator import RoundGenerator
from .game.loader import CorpusLoader
from .game.settings import Settings
from .game.state import GameState
from .io import format_game, read_names, read_text, write_game, write_text
from .redact import redact
from .redact.banned import BannedWordSet
from .utils.errors import (
    FetchFailedError,
    IOFormatError,
    SettingsError,
    WhosThatError,
)
from .utils.logging import configure_logging
from .verify import scanner

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="whosthat",
    help="Who's That Pokémon? Use 'whosthat play' to start a game.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Optional[Path], verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging(cfg.logging.level, verbose=verbose)
    if verbose:
        typer.echo("Loaded config", err=True)
    return cfg


def _settings_from(
    cfg: ConfigModel,
    *,
    rounds: Optional[int],
    per_round: Optional[int],
    gens: Optional[List[str]],
) -> Settings:
    settings = Settings()
    try:
        indices = [parse_generation(g) for g in gens] if gens else cfg.game.generations
        settings = Settings.create(
            rounds if rounds is not None else cfg.game.rounds,
            per_round if per_round is not None else cfg.game.entities_per_round,
            indices,
        )
    except (SettingsError, ValueError) as exc:
        _safe_exit(4, str(exc))
    return settings


class ProgressView:
    """Echo loading progress to stderr while the controller works."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose
        self._last: tuple[bool, bool, int] | None = None

    def render(self, state: GameState) -> None:
        if not self.verbose:
            return
        key = (state.corpus_loading, state.game_loading, state.generation)
        if key == self._last:
            return
        self._last = key
        if state.error is not None:
            typer.echo(f"Error: {state.error}", err=True)
        elif state.corpus_loading:
            typer.echo("Loading creature names", err=True)
        elif state.game_loading:
            typer.echo(
                f"Generating game {state.generation} "
                f"({state.settings.round_count} x {state.settings.entities_per_round})",
                err=True,
            )
        elif not state.entities:
            typer.echo(f"Loaded {len(state.banned or ())} creature names", err=True)
        else:
            typer.echo(f"Generated {len(state.entities)} creatures", err=True)


async def _play(
    cfg: ConfigModel, settings: Settings, *, verbose: bool, interactive: bool
) -> GameController:
    async with AiohttpPokeApi.from_config(cfg.api) as api:
        controller = GameController(
            CorpusLoader(api),
            RoundGenerator.from_config(api, cfg),
            settings,
            views=[ProgressView(verbose)],
        )
        state = await controller.start()
        while state.can_retry and interactive and typer.confirm(f"{state.error} Retry?"):
            state = await controller.retry()
    return controller


def _interactive_loop(controller: GameController) -> None:
    while True:
        state = controller.state
        typer.echo(format_game(state.rounds))
        if all(e.revealed for e in state.entities):
            break
        answer = typer.prompt("Reveal id ('a' for all, 'q' to quit)", default="q")
        answer = answer.strip().lower()
        if answer == "q":
            break
        if answer == "a":
            controller.reveal_all()
            continue
        try:
            controller.reveal(int(answer))
        except (ValueError, KeyError):
            typer.echo(f"No creature with id {answer!r} in this game", err=True)


def _residuals(entities_text: list[str], banned: BannedWordSet) -> int:
    return sum(scanner.scan_text(text, banned).residual_count for text in entities_text)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the whosthat command group."""
    pass


@app.command()
def generations() -> None:
    """List the selectable generations and their id ranges."""

    for gen in GENERATIONS:
        typer.echo(
            f"{gen.label:>4}  {gen.short_name:<6} {gen.full_name:<20} "
            f"#{gen.start_id:04d}-#{gen.end_id:04d}"
        )


@app.command()
def play(  # noqa: PLR0913
    rounds: Optional[int] = typer.Option(  # noqa: B008
        None, "--rounds", "-r", help="Number of rounds [1-10]"
    ),
    per_round: Optional[int] = typer.Option(  # noqa: B008
        None, "--per-round", "-p", help="Creatures per round [1-6]"
    ),
    gens: Optional[List[str]] = typer.Option(  # noqa: B008
        None, "--gen", "-g", help="Include a generation (I-IX or 1-9); repeatable"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible games"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    export_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--export", help="Write the game to a .txt or .json file"
    ),
    reveal: bool = typer.Option(False, "--reveal", help="Show every answer"),  # noqa: B008
    interactive: bool = typer.Option(  # noqa: B008
        False, "--interactive/--no-interactive", "-i", help="Reveal answers one at a time"
    ),
    strict: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--strict/--no-strict",
        help="Exit non-zero when names remain visible after redaction",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Generate a game and print it."""

    cfg = _load(config_path, verbose)
    if seed is not None:
        cfg.game.seed = seed
    settings = _settings_from(cfg, rounds=rounds, per_round=per_round, gens=gens)
    strict_mode = cfg.verification.fail_on_residual if strict is None else strict

    controller = asyncio.run(_play(cfg, settings, verbose=verbose, interactive=interactive))
    state = controller.state
    if state.error is not None:
        code = 3 if isinstance(state.error, FetchFailedError) else 5
        _safe_exit(code, str(state.error))

    if export_path is not None:
        try:
            write_game(export_path, state.rounds, reveal=reveal)
        except (IOFormatError, OSError) as exc:
            _safe_exit(3, str(exc))
        if verbose:
            typer.echo(f"Wrote {export_path}", err=True)

    if interactive:
        _interactive_loop(controller)
    else:
        typer.echo(format_game(state.rounds, reveal=reveal), nl=False)

    if state.banned is None:
        _safe_exit(5, "creature names were not loaded")
        return
    residuals = _residuals([e.flavor_text for e in state.entities], state.banned)
    if verbose:
        typer.echo(f"Verification residuals={residuals}", err=True)
    if strict_mode and residuals > 0:
        _safe_exit(6, None)


@app.command("redact")
def redact_command(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Text file to redact"
    ),
    names_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--names", help="Name list (.txt or .json); fetched from the API when omitted"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file; stdout when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    strict: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--strict/--no-strict",
        help="Exit non-zero when names remain visible after redaction",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Mask creature names in a text file."""

    cfg = _load(config_path, verbose)
    strict_mode = cfg.verification.fail_on_residual if strict is None else strict

    try:
        text = read_text(in_path)
        if names_path is not None:
            banned = BannedWordSet(read_names(names_path))
        else:
            banned = asyncio.run(_fetch_banned(cfg))
    except (OSError, UnicodeDecodeError, IOFormatError, FetchFailedError) as exc:
        _safe_exit(3, str(exc))
    except WhosThatError as exc:
        _safe_exit(5, str(exc))
    if verbose:
        typer.echo(f"Loaded {len(banned)} names", err=True)

    result = redact(text, banned, mask=cfg.redact.mask)
    if verbose:
        typer.echo(f"Masked {result.masked_count} words", err=True)

    if out_path is None:
        typer.echo(result.text)
    else:
        try:
            write_text(out_path, result.text)
        except OSError as exc:
            _safe_exit(3, str(exc))

    report = scanner.scan_text(result.text, banned)
    if verbose:
        typer.echo(f"Verification residuals={report.residual_count}", err=True)
    if strict_mode and report.residual_count > 0:
        _safe_exit(6, f"Visible names: {', '.join(report.names)}")


async def _fetch_banned(cfg: ConfigModel) -> BannedWordSet:
    async with AiohttpPokeApi.from_config(cfg.api) as api:
        return await CorpusLoader(api).load()
