"""
Command-line interface for the editor tool.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, TextIO, Tuple

from text_tool import TextToolCall, TextToolExecutionError, TextToolManager, TextToolSession
from text_tool.editor import EditorSettings, EditorTextTool


# Named fields that positional arguments fill, in order, for each operation
POSITIONAL_ARGUMENTS: Dict[str, List[str]] = {
    "edit": ["path", "old_text", "new_text", "occurrence"],
    "find": ["path", "old_text", "occurrence"],
    "replace_text": ["path", "old_text", "new_text", "occurrence"],
    "delete_text": ["path", "text_to_delete", "occurrence"],
    "insert_text": ["path", "line_number", "text", "position"],
    "delete_lines": ["path", "start_line", "end_line"],
    "delete_function": ["file_name", "function_name"],
    "create_file": ["path", "content"],
    "overwrite_file": ["path", "content"],
    "open_file": ["path", "line_number"],
    "goto_line": ["line_number"],
    "session_summary": [],
}

# Named arguments whose values are JSON objects
OBJECT_ARGUMENTS = ("normalization", "matching")

# Options the argument parser handles itself
PARSER_OPTIONS = ("--json", "--working-dir", "--settings", "--log-dir", "--list", "--help")

DEFAULT_LOG_DIR = "~/.textsplice/logs"


class CommandLineError(Exception):
    """Raised when the command line cannot be turned into a tool call."""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textsplice",
        description="Find and edit text in files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s find src/lib.rs "fn target"                     # Show matches
  %(prog)s edit src/lib.rs "i32" "i64" 2                   # Replace the 2nd occurrence
  %(prog)s edit src/lib.rs "foo" --matching='{"regex": true}'
  %(prog)s edit run.sh -- --verbose --quiet                # Values that look like options
  %(prog)s delete_lines notes.txt 2 4                      # Delete lines 2 to 4
  %(prog)s delete_function src/lib.rs target               # Delete a Rust function
  %(prog)s --list                                          # List operations
        """
    )

    parser.add_argument('operation', nargs='?', help='Operation to perform')
    parser.add_argument('values', nargs='*', help='Positional values for the operation')
    parser.add_argument('--json', dest='json_arguments', help='Operation arguments as a JSON object')
    parser.add_argument('--working-dir', help='Directory relative paths are resolved against')
    parser.add_argument('--settings', help='Editor settings file (JSON)')
    parser.add_argument('--log-dir', default=DEFAULT_LOG_DIR, help='Directory for log files')
    parser.add_argument('--list', action='store_true', help='List available operations')
    return parser


def split_arguments(argv: List[str]) -> Tuple[List[str], List[str], List[str]]:
    """
    Separate operation fields given as '--name=value' from the parser's own options.

    Everything after a '--' token is a positional value, even if it starts with '--'.

    Returns:
        Tuple of (tokens for the parser, named field tokens, values after '--')
    """
    parser_tokens: List[str] = []
    named_tokens: List[str] = []
    trailing_values: List[str] = []
    if '--' in argv:
        separator = argv.index('--')
        argv, trailing_values = argv[:separator], argv[separator + 1:]

    for token in argv:
        if token.startswith('--') and len(token) > 2 and token.split('=', 1)[0] not in PARSER_OPTIONS:
            named_tokens.append(token)

        else:
            parser_tokens.append(token)

    return parser_tokens, named_tokens, trailing_values


def parse_command_line(argv: List[str]) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse a command line.

    Returns:
        Tuple of (parsed arguments, named field tokens)
    """
    parser_tokens, named_tokens, trailing_values = split_arguments(argv)
    args = create_parser().parse_intermixed_args(parser_tokens)

    if trailing_values and args.operation is None:
        args.operation, trailing_values = trailing_values[0], trailing_values[1:]

    args.values.extend(trailing_values)
    return args, named_tokens


def parse_named_arguments(tokens: List[str]) -> Dict[str, Any]:
    """
    Parse '--name=value' tokens into operation fields.

    A bare '--name' is taken as true.  Dashes in names become underscores.

    Raises:
        CommandLineError: If an object-valued field is not valid JSON
    """
    named: Dict[str, Any] = {}
    for token in tokens:
        name, sep, value = token[2:].partition('=')
        if not sep:
            value = "true"

        key = name.replace('-', '_')
        if key in OBJECT_ARGUMENTS:
            try:
                named[key] = json.loads(value)

            except json.JSONDecodeError as e:
                raise CommandLineError(f"'{key}' must be a JSON object: {e}") from e

            continue

        named[key] = value

    return named


def build_arguments(
    operation: str,
    values: List[str],
    named: Dict[str, Any],
    json_arguments: str | None = None
) -> Dict[str, Any]:
    """
    Merge JSON, positional and named values into tool call arguments.

    Later sources override earlier ones: JSON, then positional, then named.

    Raises:
        CommandLineError: If the operation is unknown or there are too many positional values
    """
    if operation not in POSITIONAL_ARGUMENTS:
        raise CommandLineError(
            f"Unknown operation: {operation}. Available operations: {', '.join(sorted(POSITIONAL_ARGUMENTS))}"
        )

    arguments: Dict[str, Any] = {}
    if json_arguments:
        try:
            decoded = json.loads(json_arguments)

        except json.JSONDecodeError as e:
            raise CommandLineError(f"Invalid --json value: {e}") from e

        if not isinstance(decoded, dict):
            raise CommandLineError("--json value must be an object")

        arguments.update(decoded)

    fields = POSITIONAL_ARGUMENTS[operation]
    if len(values) > len(fields):
        usage = " ".join(name.upper() for name in fields)
        raise CommandLineError(f"Too many values for '{operation}'. Usage: {operation} {usage}")

    arguments.update(zip(fields, values))
    arguments.update(named)
    arguments["operation"] = operation
    return arguments


def list_operations(tool: EditorTextTool, out: TextIO) -> None:
    """Print the tool's operations."""
    for name, operation in tool.get_operation_definitions().items():
        usage = " ".join(field.upper() for field in POSITIONAL_ARGUMENTS.get(name, []))
        print(f"{name} {usage}".rstrip(), file=out)
        print(f"    {operation.description}", file=out)


def run(args: argparse.Namespace, named_tokens: List[str], out: TextIO = sys.stdout) -> int:
    """
    Run one operation.

    Args:
        args: Parsed command line
        named_tokens: Operation fields given as '--name=value'
        out: Stream the JSON result is written to

    Returns:
        Exit code: 0 on success, 1 on a diagnostic or an error
    """
    logger = logging.getLogger("TextToolCli")

    try:
        settings = EditorSettings.load(args.settings) if args.settings else EditorSettings.create_default()

    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        print(json.dumps({"success": False, "message": f"Failed to load settings: {e}"}, indent=2), file=out)
        return 1

    tool = EditorTextTool(settings)

    if args.list:
        list_operations(tool, out)
        return 0

    if not args.operation:
        print(json.dumps({"success": False, "message": "No operation given. Use --list to see operations"}), file=out)
        return 1

    try:
        arguments = build_arguments(args.operation, args.values, parse_named_arguments(named_tokens), args.json_arguments)

    except CommandLineError as e:
        print(json.dumps({"success": False, "message": str(e)}, indent=2), file=out)
        return 1

    manager = TextToolManager()
    manager.unregister_tool("editor")
    manager.register_tool(tool, "Editor")

    session = TextToolSession(
        working_directory=Path(args.working_dir) if args.working_dir else None,
        window_size=settings.window_size,
        max_history=settings.max_history
    )

    tool_call = TextToolCall(id="cli", name="editor", arguments=arguments)
    logger.debug("Running %s with %s", args.operation, sorted(arguments))

    try:
        result = manager.execute(tool_call, session)

    except TextToolExecutionError as e:
        logger.warning("Operation %s failed: %s", args.operation, str(e))
        output: Dict[str, Any] = {"success": False, "message": str(e)}
        if e.error_details:
            output["error_details"] = e.error_details

        print(json.dumps(output, indent=2), file=out)
        return 1

    print(json.dumps(result.to_dict(), indent=2), file=out)
    return 0 if result.success else 1


def execute_command(argv: List[str], out: TextIO = sys.stdout) -> int:
    """Parse a command line and run it."""
    args, named_tokens = parse_command_line(argv)
    return run(args, named_tokens, out)
