"""Application entry point for the checklist assistant."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Mapping, Optional

from art import tprint
from rich.console import Console
from rich.table import Table

import settings
from adapters.json_config_store import JsonConfigStore
from adapters.output_formatting import (
    build_contacts_table,
    build_outputs_panel,
    format_outputs,
)
from core.client_request import ClientRequest, format_request_comment, format_request_text
from core.config import ChecklistConfig, ConfigError, default_config
from core.contacts import parse_rows, summarize_rows
from core.processor import ChecklistEngine
from core.questions import CHECKLIST_QUESTIONS, FieldStatus, field_status, progress

NAME = "CHECKLIST"
FONT = "tarty-1"

STATUS_STYLES = {
    FieldStatus.ERROR: "red",
    FieldStatus.WARNING: "dark_orange",
    FieldStatus.SUCCESS: "green",
    FieldStatus.NEUTRAL: "dim",
}

LOGGER = logging.getLogger(__name__)

# Commands that replace the stored file and so must run even when it is unreadable.
CONFIG_REPLACING_COMMANDS = frozenset({"import", "reset"})


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _build_file_handler(file_cfg: Mapping[str, Any]) -> RotatingFileHandler:
    path = str(file_cfg.get("path") or settings.DEFAULT_LOG_PATH)
    if not os.path.isabs(path):
        path = os.path.join(settings.PROJECT_ROOT, path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", settings.DEFAULT_LOG_MAX_BYTES)),
        backupCount=int(file_cfg.get("backup_count", settings.DEFAULT_LOG_BACKUP_COUNT)),
        encoding="utf-8",
    )


def _configure_logging(config: ChecklistConfig) -> None:
    logging_cfg = config.logging or {}
    if not logging_cfg.get("enabled", False):
        return

    level_name = str(logging_cfg.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(fmt=settings.LOG_FORMAT, datefmt=settings.LOG_DATEFMT)

    handlers: list[logging.Handler] = []

    if logging_cfg.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = logging_cfg.get("file") or {}
    if file_cfg.get("enabled", False):
        file_handler = _build_file_handler(file_cfg)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _read_text(path: Optional[str]) -> str:
    if not path:
        return ""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _read_json_object(path: str) -> dict[str, Any]:
    try:
        data = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return data


def _read_answers(path: Optional[str]) -> dict[str, str]:
    if not path:
        return {}
    answers: dict[str, str] = {}
    for key, value in _read_json_object(path).items():
        if value is None or value == "":
            continue
        if not isinstance(value, str):
            raise ConfigError(f"Answer for {key} must be a string, got {value!r}")
        answers[str(key)] = value
    return answers


def _parse_conditions(raw_conditions: list[str]) -> dict[str, str]:
    conditions: dict[str, str] = {}
    for raw in raw_conditions:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"Condition must look like question_id=value: {raw!r}")
        conditions[key.strip()] = value.strip()
    return conditions


def _cmd_generate(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    config = store.load()
    answers = _read_answers(args.answers)
    raw_text = _read_text(args.contacts)

    engine = ChecklistEngine(output=config.output)
    outputs = engine.generate(answers, raw_text, config.templates, config.responsible_name)
    LOGGER.info("Generated code %s (matched=%s)", outputs.code, outputs.matched)

    if args.format == "rich":
        console.print(build_outputs_panel(outputs))
        if raw_text.strip():
            console.print(build_contacts_table(outputs.contacts, summarize_rows(parse_rows(raw_text))))
        return
    console.print(format_outputs(outputs, args.format), markup=False, highlight=False, emoji=False, soft_wrap=True)


def _cmd_templates(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    templates = store.load().templates
    if not templates:
        console.print("No templates configured.")
        return
    table = Table(title="Templates (first match wins)")
    table.add_column("#", justify="right")
    table.add_column("id")
    table.add_column("name")
    table.add_column("conditions")
    table.add_column("code")
    table.add_column("comment")
    for index, template in enumerate(templates, start=1):
        conditions = ", ".join(f"{key}={value}" for key, value in template.conditions.items())
        table.add_row(str(index), template.id, template.name, conditions or "(any)", template.code, template.comment)
    console.print(table)


def _cmd_add_template(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    template = store.add_template(
        name=args.name,
        code=args.code,
        conditions=_parse_conditions(args.condition or []),
        comment=args.comment or "",
    )
    console.print(f"Template added: {template.name} ({template.id})")


def _cmd_remove_template(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    if store.remove_template(args.template_id):
        console.print(f"Template removed: {args.template_id}")
        return
    raise ConfigError(f"Unknown template id: {args.template_id}")


def _cmd_set_name(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    config = store.set_responsible_name(args.name)
    console.print(f"Responsible name set to: {config.responsible_name or '(empty)'}")


def _cmd_export(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    store.export_to(args.path)
    console.print(f"Config exported to {args.path}")


def _cmd_import(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    config = store.import_from(args.path)
    console.print(f"Config imported ({len(config.templates)} templates)")


def _cmd_reset(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    store.reset()
    console.print("Config reset to defaults")


def _cmd_questions(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    answers = _read_answers(args.answers)
    current = progress(answers)
    table = Table(title=f"Checklist {current.completed}/{current.total} ({round(current.percentage)}%)")
    table.add_column("section")
    table.add_column("id")
    table.add_column("question")
    table.add_column("answer")
    table.add_column("status")
    for question in CHECKLIST_QUESTIONS:
        status = field_status(question, answers)
        label = f"{question.question} *" if question.required else question.question
        table.add_row(
            question.section,
            question.id,
            label,
            answers.get(question.id, ""),
            f"[{STATUS_STYLES[status]}]{status.value}[/]",
        )
    console.print(table)


def _cmd_client_request(args: argparse.Namespace, store: JsonConfigStore, console: Console) -> None:
    request = ClientRequest.from_dict(_read_json_object(args.data))
    text = format_request_comment(request) if args.with_link else format_request_text(request)
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="checklist")
    parser.add_argument("--config", help="Path to config.json (defaults to CHECKLIST_CONFIG or ./config.json)")
    parser.add_argument("--no-banner", action="store_true", help="Skip the startup banner")
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate code, suggestion and comment")
    generate.add_argument("--answers", help="JSON file with question_id -> answer")
    generate.add_argument("--contacts", help="Text file with pasted contact rows ('-' for stdin)")
    generate.add_argument(
        "--format",
        choices=["rich", "plain", "markdown", "json"],
        default="rich",
        help="Output format",
    )
    generate.set_defaults(handler=_cmd_generate)

    templates = subparsers.add_parser("templates", help="List templates in matching order")
    templates.set_defaults(handler=_cmd_templates)

    add_template = subparsers.add_parser("add-template", help="Append a template")
    add_template.add_argument("--name", required=True)
    add_template.add_argument("--code", required=True)
    add_template.add_argument("--comment", default="")
    add_template.add_argument(
        "--condition",
        action="append",
        help="question_id=value (repeatable)",
    )
    add_template.set_defaults(handler=_cmd_add_template)

    remove_template = subparsers.add_parser("remove-template", help="Delete a template by id")
    remove_template.add_argument("template_id")
    remove_template.set_defaults(handler=_cmd_remove_template)

    set_name = subparsers.add_parser("set-name", help="Set the responsible name used in comments")
    set_name.add_argument("name")
    set_name.set_defaults(handler=_cmd_set_name)

    export = subparsers.add_parser("export", help="Write the current config to a file")
    export.add_argument("path")
    export.set_defaults(handler=_cmd_export)

    import_cmd = subparsers.add_parser("import", help="Replace the config with a file's contents")
    import_cmd.add_argument("path")
    import_cmd.set_defaults(handler=_cmd_import)

    reset = subparsers.add_parser("reset", help="Restore the default config")
    reset.set_defaults(handler=_cmd_reset)

    questions = subparsers.add_parser("questions", help="Show the checklist and answer status")
    questions.add_argument("--answers", help="JSON file with question_id -> answer")
    questions.set_defaults(handler=_cmd_questions)

    client_request = subparsers.add_parser("client-request", help="Render a Cliente x Cliente request")
    client_request.add_argument("--data", required=True, help="JSON file with the request fields")
    client_request.add_argument("--with-link", action="store_true", help="Append the card link")
    client_request.set_defaults(handler=_cmd_client_request)

    return parser


def _load_for_logging(store: JsonConfigStore, command: str) -> ChecklistConfig:
    try:
        return store.load()
    except ConfigError as exc:
        if command not in CONFIG_REPLACING_COMMANDS:
            raise
        LOGGER.warning("Ignoring unreadable config before %s: %s", command, exc)
        return default_config()


def main(argv: Optional[list[str]] = None, console: Optional[Console] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    if not getattr(args, "handler", None):
        parser.print_help()
        return 0

    store = JsonConfigStore(args.config or settings.CONFIG_PATH)
    try:
        _configure_logging(_load_for_logging(store, args.command))
        if not args.no_banner and args.command == "generate" and args.format == "rich":
            _print_banner()
        args.handler(args, store, console)
    except (ConfigError, FileNotFoundError) as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        console.print(f"Error: {exc}", markup=False, highlight=False, emoji=False, soft_wrap=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
