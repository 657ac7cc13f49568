"""Command-line interface for prompt files.

Usage:
    dotprompt render prompts/basic.prompt --var country=Malta
    dotprompt render prompts/basic.prompt --vars-json '{"country": "Malta"}' --both
    dotprompt show prompts/basic.prompt
    dotprompt normalize prompts/basic.prompt
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

import yaml
from loguru import logger

from dotprompt.prompting.errors import PromptError
from dotprompt.prompting.models import PromptFile
from dotprompt.utils.monitoring import setup_logging


def _parse_var(raw: str) -> tuple[str, Any]:
    """Parse ``key=value``; the value is read as a YAML scalar."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    if not value:
        return key, ""
    try:
        return key, yaml.safe_load(value)
    except yaml.YAMLError:
        return key, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotprompt", description="Render and inspect prompt files"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to DOTPROMPT_LOG_LEVEL).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render the prompts of a prompt file")
    render.add_argument("path", help="Prompt file to render")
    render.add_argument(
        "--var",
        dest="variables",
        action="append",
        type=_parse_var,
        default=[],
        metavar="KEY=VALUE",
        help="Parameter value; repeatable. Values are parsed as YAML scalars.",
    )
    render.add_argument(
        "--vars-json",
        default=None,
        help="JSON object of parameter values, merged before --var values.",
    )
    which = render.add_mutually_exclusive_group()
    which.add_argument("--system", action="store_const", const="system", dest="which")
    which.add_argument("--user", action="store_const", const="user", dest="which")
    which.add_argument("--both", action="store_const", const="both", dest="which")
    render.set_defaults(which="user")

    show = sub.add_parser("show", help="Print prompt file metadata as JSON")
    show.add_argument("path", help="Prompt file to inspect")

    normalize = sub.add_parser(
        "normalize", help="Print the canonical serialization of a prompt file"
    )
    normalize.add_argument("path", help="Prompt file to normalize")

    return parser


def _collect_values(args: argparse.Namespace) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if args.vars_json:
        loaded = json.loads(args.vars_json)
        if not isinstance(loaded, dict):
            raise ValueError("--vars-json must be a JSON object")
        values.update(loaded)
    values.update(dict(args.variables))
    return values


def _cmd_render(args: argparse.Namespace) -> int:
    prompt_file = PromptFile.from_file(args.path)
    values = _collect_values(args)
    if args.which in ("system", "both"):
        print(prompt_file.get_system_prompt(values))
    if args.which in ("user", "both"):
        print(prompt_file.get_user_prompt(values))
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    prompt_file = PromptFile.from_file(args.path)
    config = prompt_file.config
    summary = {
        "name": prompt_file.name,
        "model": prompt_file.model or None,
        "outputFormat": prompt_file.output_format.value,
        "temperature": config.temperature,
        "maxTokens": config.max_tokens,
        "parameters": config.input.parameters,
        "defaults": sorted(config.input.default),
        "fewShots": len(prompt_file.few_shots),
    }
    print(json.dumps(summary, indent=2))
    return 0


def _cmd_normalize(args: argparse.Namespace) -> int:
    sys.stdout.write(PromptFile.from_file(args.path).serialize().decode("utf-8"))
    return 0


_COMMANDS = {
    "render": _cmd_render,
    "show": _cmd_show,
    "normalize": _cmd_normalize,
}


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``dotprompt`` console script."""
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        return _COMMANDS[args.command](args)
    except PromptError as exc:
        logger.error("{}", exc)
        return 1
    except (OSError, ValueError) as exc:
        logger.error("{}: {}", type(exc).__name__, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
