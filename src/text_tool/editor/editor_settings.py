"""Settings for the editor tool."""

import json
import os
from dataclasses import dataclass, field

from text_edit import MatchingOptions, NormalizationOptions


@dataclass
class EditorSettings:
    """
    Defaults used by editor operations.

    Attributes:
        normalization: Default normalization flags; per-call values override them field by field
        matching: Default matching options; per-call values override them field by field
        max_file_size_mb: Largest file that will be read or written
        window_size: Lines shown per window when a file is opened
        max_history: Number of session history entries kept
        encoding: Text encoding for reading and writing files
    """
    normalization: NormalizationOptions = field(default_factory=NormalizationOptions)
    matching: MatchingOptions = field(default_factory=MatchingOptions)
    max_file_size_mb: int = 10
    window_size: int = 100
    max_history: int = 100
    encoding: str = "utf-8"

    @classmethod
    def create_default(cls) -> "EditorSettings":
        """Create a new EditorSettings object with default values."""
        return cls(
            normalization=NormalizationOptions(),
            matching=MatchingOptions(),
            max_file_size_mb=10,
            window_size=100,
            max_history=100,
            encoding="utf-8"
        )

    @classmethod
    def load(cls, path: str) -> "EditorSettings":
        """
        Load editor settings from file.

        Unknown keys are ignored and missing keys keep their defaults.

        Args:
            path: Path to the settings file

        Returns:
            EditorSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            normalization_data = data.get("normalization", {})
            for key, default in settings.normalization.to_dict().items():
                setattr(settings.normalization, key, bool(normalization_data.get(key, default)))

            matching_data = data.get("matching", {})
            settings.matching = MatchingOptions(
                regex=bool(matching_data.get("regex", settings.matching.regex)),
                fuzzy=bool(matching_data.get("fuzzy", settings.matching.fuzzy)),
                fuzzy_threshold=float(matching_data.get("fuzzy_threshold", settings.matching.fuzzy_threshold)),
                context_lines=int(matching_data.get("context_lines", settings.matching.context_lines)),
                max_matches=int(matching_data.get("max_matches", settings.matching.max_matches))
            )

            settings.max_file_size_mb = int(data.get("max_file_size_mb", settings.max_file_size_mb))
            settings.window_size = int(data.get("window_size", settings.window_size))
            settings.max_history = int(data.get("max_history", settings.max_history))
            settings.encoding = data.get("encoding", settings.encoding)

        return settings

    def save(self, path: str) -> None:
        """
        Save editor settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "normalization": self.normalization.to_dict(),
            "matching": self.matching.to_dict(),
            "max_file_size_mb": self.max_file_size_mb,
            "window_size": self.window_size,
            "max_history": self.max_history,
            "encoding": self.encoding
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
