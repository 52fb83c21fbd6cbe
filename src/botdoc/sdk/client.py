from __future__ import annotations

import os
from typing import List, Literal, Optional

from pydantic import ValidationError

from ..config.loader import load_config
from ..config.models import BotdocConfig
from ..core.errors import ConfigError
from ..observability.logging import get_logger, log_config_fingerprint
from ..processing.names import correct_acronyms, flip_leading_case, to_identifier
from ..processing.patterns import PatternSet, compile_patterns
from ..processing.text import RewriteStage, build_prose_pipeline, html_to_text, run_pipeline
from ..processing.types import map_type
from ..processing.wrapping import fit_to_lines, wrap as wrap_text


class DocNormalizer:
    """Entry point for callers turning harvested API docs into Go source fragments.

    Holds one configuration and one compiled :class:`PatternSet`; every
    method is a pure function of its arguments and that state.
    """

    def __init__(self, config: Optional[BotdocConfig] = None, *, patterns: Optional[PatternSet] = None) -> None:
        self._cfg = config or BotdocConfig()
        self._patterns = patterns or compile_patterns()
        self._logger = get_logger()
        self._stages = self._build_stages()
        log_config_fingerprint(self._cfg.model_dump())

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = None,
        *,
        set_overrides: Optional[List[str]] = None,
    ) -> "DocNormalizer":
        # If not provided, prefer botdoc.yaml in CWD; otherwise run on defaults
        if config_path is None and os.path.exists("botdoc.yaml"):
            config_path = "botdoc.yaml"
        return cls(load_config(config_path, set_overrides=set_overrides))

    @property
    def config(self) -> BotdocConfig:
        return self._cfg

    @property
    def stages(self) -> tuple[RewriteStage, ...]:
        return self._stages

    def _build_stages(self) -> tuple[RewriteStage, ...]:
        return build_prose_pipeline(self._cfg.links.base_url, self._cfg.links.docs_url, self._patterns)

    # --- fluent overrides ---
    def _with_wrap(self, **changes: object) -> "DocNormalizer":
        data = self._cfg.model_dump()
        data["wrap"].update(changes)
        try:
            cfg = BotdocConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid wrap settings {changes!r}: {e}") from e
        return DocNormalizer(cfg, patterns=self._patterns)

    def with_width(self, max_line_len: int) -> "DocNormalizer":
        return self._with_wrap(max_line_len=max_line_len)

    def with_delimiter(self, delimiter: str) -> "DocNormalizer":
        return self._with_wrap(delimiter=delimiter)

    # --- annotations ---
    def prose(self, html: str) -> str:
        return run_pipeline(html, self._stages)

    def plain(self, html: str) -> str:
        return html_to_text(html, self._patterns)

    def wrap(self, text: str) -> List[str]:
        return wrap_text(text, self._cfg.wrap.max_line_len)

    def comment(self, html: str, delimiter: Optional[str] = None) -> str:
        """Convert an HTML fragment into a wrapped comment block."""
        delimiter = self._cfg.wrap.delimiter if delimiter is None else delimiter
        with self._logger.operation("comment", chars=len(html)):
            return fit_to_lines(self.prose(html), delimiter, self._cfg.wrap.max_line_len)

    # --- types and names ---
    def type_of(self, text: str, optional: bool = False) -> str:
        return map_type(text, optional, self._patterns)

    def identifier(self, name: str) -> str:
        return to_identifier(name)

    def field_name(self, name: str) -> str:
        """``file_unique_id`` -> ``fileUniqueID``, for unexported Go names."""
        # lowering "URL" or "IPAddress" yields "uRL" or "iPAddress", which the undo rules repair
        lowered = flip_leading_case(self.identifier(name), "lower")
        return correct_acronyms(lowered + " ")[:-1]

    def correct(self, source: str) -> str:
        return correct_acronyms(source)

    def leading_case(self, text: str, case: Literal["lower", "upper"]) -> str:
        return flip_leading_case(text, case)


__all__ = ["DocNormalizer"]
