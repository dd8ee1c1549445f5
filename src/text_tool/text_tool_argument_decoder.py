"""Typed extraction of values from tool call arguments."""

from typing import Any, Dict

from text_tool.text_tool_exceptions import TextToolExecutionError


class TextToolArgumentDecoder:
    """
    Reads typed values out of an arguments dictionary.

    Integers, numbers and booleans may also be supplied as strings, which is
    how they arrive from the command line.  Anything that cannot be decoded
    raises TextToolExecutionError.
    """

    @staticmethod
    def require_str(key: str, arguments: Dict[str, Any]) -> str:
        """
        Extract a required string value.

        Args:
            key: Key to extract from arguments
            arguments: Dictionary containing operation parameters

        Returns:
            String value for the given key

        Raises:
            TextToolExecutionError: If key is missing or value is not a string
        """
        if key not in arguments:
            raise TextToolExecutionError(f"No '{key}' argument provided")

        value = arguments[key]
        if not isinstance(value, str):
            raise TextToolExecutionError(f"'{key}' must be a string")

        return value

    @classmethod
    def optional_str(cls, key: str, arguments: Dict[str, Any], default: str | None = None) -> str | None:
        """Extract an optional string value, returning default if absent."""
        if arguments.get(key) is None:
            return default

        return cls.require_str(key, arguments)

    @staticmethod
    def require_int(key: str, arguments: Dict[str, Any]) -> int:
        """
        Extract a required integer value.

        Args:
            key: Key to extract from arguments
            arguments: Dictionary containing operation parameters

        Returns:
            Integer value for the given key

        Raises:
            TextToolExecutionError: If key is missing or value is not an integer
        """
        if key not in arguments:
            raise TextToolExecutionError(f"No '{key}' argument provided")

        value = arguments[key]

        # bool is a subclass of int, but True is not a line number
        if isinstance(value, bool):
            raise TextToolExecutionError(f"'{key}' must be an integer")

        if isinstance(value, int):
            return value

        if isinstance(value, str):
            try:
                return int(value.strip())

            except ValueError as e:
                raise TextToolExecutionError(f"'{key}' must be an integer") from e

        raise TextToolExecutionError(f"'{key}' must be an integer")

    @classmethod
    def optional_int(cls, key: str, arguments: Dict[str, Any], default: int | None = None) -> int | None:
        """Extract an optional integer value, returning default if absent."""
        if arguments.get(key) is None:
            return default

        return cls.require_int(key, arguments)

    @staticmethod
    def optional_bool(key: str, arguments: Dict[str, Any], default: bool = False) -> bool:
        """
        Extract an optional boolean value.

        The strings "true" and "false" (any case) are accepted.

        Raises:
            TextToolExecutionError: If the value is present but not a boolean
        """
        value = arguments.get(key)
        if value is None:
            return default

        if isinstance(value, bool):
            return value

        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"

        raise TextToolExecutionError(f"'{key}' must be a boolean")

    @staticmethod
    def optional_float(key: str, arguments: Dict[str, Any], default: float | None = None) -> float | None:
        """
        Extract an optional number value.

        Raises:
            TextToolExecutionError: If the value is present but not a number
        """
        value = arguments.get(key)
        if value is None:
            return default

        if isinstance(value, bool):
            raise TextToolExecutionError(f"'{key}' must be a number")

        if isinstance(value, (int, float)):
            return float(value)

        if isinstance(value, str):
            try:
                return float(value.strip())

            except ValueError as e:
                raise TextToolExecutionError(f"'{key}' must be a number") from e

        raise TextToolExecutionError(f"'{key}' must be a number")

    @staticmethod
    def optional_dict(key: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Extract an optional object value.

        Returns:
            The object, or an empty dictionary if absent

        Raises:
            TextToolExecutionError: If the value is present but not an object
        """
        value = arguments.get(key)
        if value is None:
            return {}

        if not isinstance(value, dict):
            raise TextToolExecutionError(f"'{key}' must be an object")

        return value
