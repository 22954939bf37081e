"""Run settings and validation."""

from dataclasses import dataclass
from typing import List, Tuple


class SettingsError(Exception):
    """Settings validation errors."""
    pass


@dataclass(frozen=True)
class SyncSettings:
    """
    Names and patterns used while syncing manuals.

    There is no configuration file; the CLI builds one of these with the
    defaults and hands it to the synchronizer.
    """
    gamelist_filename: str = "gamelist.xml"
    manuals_subdir: str = "media/manuals"
    manual_prefix: str = "./media/manuals/"
    manual_extensions: Tuple[str, ...] = (".pdf", ".txt")
    remove_pattern: str = "media/manuals"
    report_filename: str = "missing_manuals.txt"

    def validate(self) -> None:
        """
        Validate settings values.

        Raises:
            SettingsError: If any value is unusable
        """
        errors = []

        if not self.gamelist_filename:
            errors.append("gamelist_filename must not be empty")
        if not self.manuals_subdir:
            errors.append("manuals_subdir must not be empty")
        if not self.manual_prefix.endswith('/'):
            errors.append("manual_prefix must end with '/'")
        errors.extend(_validate_extensions(self.manual_extensions))
        if not self.remove_pattern:
            errors.append("remove_pattern must not be empty")
        if not self.report_filename:
            errors.append("report_filename must not be empty")

        if errors:
            raise SettingsError(
                "Settings validation failed:\n  - " + "\n  - ".join(errors)
            )


def _validate_extensions(extensions: Tuple[str, ...]) -> List[str]:
    """Validate the ordered list of manual file extensions."""
    errors = []

    if not extensions:
        errors.append("manual_extensions must contain at least one extension")
        return errors

    for ext in extensions:
        if not isinstance(ext, str) or not ext.startswith('.') or len(ext) < 2:
            errors.append(f"invalid manual extension: {ext!r} (expected e.g. '.pdf')")

    return errors
