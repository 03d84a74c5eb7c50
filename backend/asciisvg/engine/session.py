"""Caller-side coalescing for rapid setting changes.

Every request gets a sequence number. A request waits out a short quiet
period and only runs if nothing newer arrived in the meantime; a result is
only published if it still belongs to the newest request. The generation
core itself stays stateless.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from asciisvg.config import settings as app_settings
from asciisvg.engine.context import AsciiSettings, GenerationResult
from asciisvg.engine.decoder import ImageDecoder
from asciisvg.engine.errors import AsciiSvgError, InvalidSettingsError
from asciisvg.engine.generator import generate_ascii_svg
from asciisvg.engine.sampler import CharacterPicker

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to generate ASCII. Check your input source."

GenerateFn = Callable[..., Awaitable[GenerationResult]]


class GenerationSession:
    """Holds the authoritative result for one caller."""

    def __init__(
        self,
        debounce_s: float | None = None,
        decoder: ImageDecoder | None = None,
        rng: CharacterPicker | None = None,
        generate: GenerateFn = generate_ascii_svg,
    ) -> None:
        if debounce_s is None:
            debounce_s = app_settings.asciisvg_debounce_ms / 1000
        self.debounce_s = debounce_s
        self.decoder = decoder
        self.rng = rng
        self._generate = generate

        self.result: GenerationResult | None = None
        self.error: str | None = None
        self._seq = 0
        self._in_flight = 0

    @property
    def sequence(self) -> int:
        """Sequence number of the newest request."""
        return self._seq

    @property
    def is_processing(self) -> bool:
        return self._in_flight > 0

    async def request(
        self,
        source: str | bytes,
        settings: AsciiSettings,
        is_svg_code: bool,
    ) -> GenerationResult | None:
        """Queue a generation; returns the result only if it became authoritative.

        Superseded and stale requests return ``None``. A failing request
        records ``error`` and leaves the previous ``result`` in place.
        """
        self._seq += 1
        seq = self._seq

        if self.debounce_s > 0:
            await asyncio.sleep(self.debounce_s)
        if seq != self._seq:
            logger.debug("Request %d superseded before start (newest %d)", seq, self._seq)
            return None

        self._in_flight += 1
        try:
            result = await self._generate(
                source,
                settings,
                is_svg_code,
                decoder=self.decoder,
                rng=self.rng,
            )
        except AsciiSvgError as e:
            if seq == self._seq:
                logger.warning("Generation %d failed: %s", seq, e)
                if isinstance(e, InvalidSettingsError):
                    self.error = str(e)
                else:
                    self.error = GENERIC_FAILURE_MESSAGE
            return None
        finally:
            self._in_flight -= 1

        if seq != self._seq:
            logger.debug("Discarding stale result %d (newest %d)", seq, self._seq)
            return None

        self.result = result
        self.error = None
        return result
