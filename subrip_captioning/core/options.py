"""Build options for SubRip serialization."""

import logging
from typing import Any, Dict, Mapping

from .exceptions import InvalidOptionKey

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: Dict[str, Any] = {
    'strip_tags': False,
    'strip_basic': False,
    'replacements': False,
}


class OptionsManager:
    """Holds the text-transform options used when building a file.

    Only the keys in DEFAULT_OPTIONS are accepted.
    """

    def __init__(self, options: Mapping[str, Any] = None):
        self._options = dict(DEFAULT_OPTIONS)
        if options:
            self.set_options(options)

    def set_options(self, options: Mapping[str, Any]) -> None:
        """Replace the current options with `options` merged over the defaults.

        Raises:
            InvalidOptionKey: If any key is not a recognised option. The
                current options are left unchanged.
        """
        unknown = set(options) - set(DEFAULT_OPTIONS)
        if unknown:
            raise InvalidOptionKey(unknown)

        self._options = {**DEFAULT_OPTIONS, **options}
        logger.debug(f"Build options set to {self._options}")

    def reset_options(self) -> None:
        """Restore every option to its default."""
        self._options = dict(DEFAULT_OPTIONS)

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def __getitem__(self, key: str) -> Any:
        return self._options[key]
