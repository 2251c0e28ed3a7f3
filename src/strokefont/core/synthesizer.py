"""Synthesis orchestration from stroke snapshots to font bytes.

Each character runs through a strict chain: coordinate normalization,
ribbon construction, merging, outline encoding and advance width
measurement. Characters are independent of one another, so they can be
processed in worker processes; the ribbon fold inside one character always
stays sequential.

Key components:
- synthesize_character: The per-character pipeline
- process_character: Top-level picklable wrapper for parallel execution
- FontSynthesizer: Main orchestrator producing font buffers, files and previews
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from strokefont.config import FontMetadata, StrokeFontSettings
from strokefont.core.assembler import FontAssembler, advance_width, glyph_name
from strokefont.core.encoder import encode_merge_result
from strokefont.core.geometry import GeometryBackend, PathopsGeometry
from strokefont.core.merger import GlyphMerger
from strokefont.core.normalizer import CoordinateNormalizer
from strokefont.core.ribbon import RibbonBuilder
from strokefont.domain import EncodedGlyph, GlyphData, Stroke
from strokefont.exceptions import CapabilityUnavailableError
from strokefont.io.compiler import FontCompiler, FontToolsCompiler
from strokefont.io.preview import PreviewHandle, PreviewSession
from strokefont.io.writer import FontWriter
from strokefont.utils import SynthesisLogger, SynthesisStats, get_logger


@dataclass
class GlyphOutcome:
    """Result of running the pipeline for one character.

    Attributes:
        glyph: The encoded glyph, None when the character was skipped
        skip_reason: Why the character produced no glyph
        unresolved_ribbons: Ribbons kept with unresolved self-intersections
    """

    glyph: EncodedGlyph | None = None
    skip_reason: str | None = None
    unresolved_ribbons: int = 0


@dataclass
class SynthesisResult:
    """A serialized font together with what went into it.

    Attributes:
        buffer: Font bytes
        glyphs: Drawn glyphs in input order (mandatory glyphs excluded)
        stats: Run statistics
    """

    buffer: bytes
    glyphs: list[EncodedGlyph] = field(default_factory=list)
    stats: SynthesisStats = field(default_factory=SynthesisStats)


def synthesize_character(
    char: str,
    strokes: list[Stroke],
    metadata: FontMetadata,
    settings: StrokeFontSettings,
    geometry: GeometryBackend,
) -> GlyphOutcome:
    """Run the full outline pipeline for one character.

    Args:
        char: The character (one code point)
        strokes: Its strokes in drawing order
        metadata: Generation options (auto-scale, weight multiplier)
        settings: Application settings
        geometry: Geometry backend

    Returns:
        GlyphOutcome with the encoded glyph or the reason it was skipped
    """
    if len(char) != 1:
        return GlyphOutcome(skip_reason="not a single code point")

    drawable = [s for s in strokes if not s.is_eraser]
    if not drawable:
        return GlyphOutcome(skip_reason="no drawable strokes")

    normalizer = CoordinateNormalizer(settings.canvas, settings.auto_scale, settings.font)
    transform = normalizer.normalize(char, drawable, auto_scale=metadata.auto_scale)

    builder = RibbonBuilder(geometry, settings.stroke)
    ribbons = []
    for stroke in drawable:
        ribbon = builder.build(stroke, transform, weight_multiplier=metadata.weight_multiplier)
        if ribbon is not None:
            ribbons.append(ribbon)

    merge = GlyphMerger(geometry).merge(ribbons, char=char)
    if merge is None:
        return GlyphOutcome(skip_reason="no stroke long enough for a ribbon")

    glyph = EncodedGlyph(
        name=glyph_name(char),
        unicode=ord(char),
        advance_width=advance_width(merge, geometry, settings.font),
        commands=encode_merge_result(merge),
        merged=merge.is_merged,
    )
    return GlyphOutcome(
        glyph=glyph,
        unresolved_ribbons=sum(1 for r in ribbons if not r.resolved),
    )


def process_character(
    char: str,
    stroke_dicts: list[dict[str, Any]],
    metadata_dict: dict[str, Any],
    settings_dict: dict[str, Any],
    geometry: GeometryBackend,
) -> dict[str, Any]:
    """Synthesize one character from serialized input.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor.

    Returns:
        Dictionary containing one of:
        - Success: {"glyph": glyph_dict, "unresolved_ribbons": int, "duration_ms": float}
        - Skipped: {"skipped": str, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        strokes = [Stroke.from_dict(s) for s in stroke_dicts]
        metadata = FontMetadata.model_validate(metadata_dict)
        settings = StrokeFontSettings.model_validate(settings_dict)

        outcome = synthesize_character(char, strokes, metadata, settings, geometry)

        duration_ms = (time.time() - start_time) * 1000
        if outcome.glyph is None:
            return {"skipped": outcome.skip_reason, "duration_ms": duration_ms}
        return {
            "glyph": outcome.glyph.to_dict(),
            "unresolved_ribbons": outcome.unresolved_ribbons,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class FontSynthesizer:
    """Orchestrates font synthesis from hand-drawn strokes.

    The geometry backend and font compiler are explicit dependencies. A
    missing or not-ready capability fails the whole run before any character
    is processed.

    Example:
        synthesizer = FontSynthesizer.default()
        result = synthesizer.synthesize(glyph_data, FontMetadata(auto_scale=True))
        Path("Hand-Regular.ttf").write_bytes(result.buffer)
    """

    def __init__(
        self,
        settings: StrokeFontSettings | None = None,
        geometry: GeometryBackend | None = None,
        compiler: FontCompiler | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            settings: Application settings (defaults if None)
            geometry: Geometry backend
            compiler: Font-encoding capability
            logger: Logger (module logger if None)
        """
        self.settings = settings or StrokeFontSettings()
        self.geometry = geometry
        self.compiler = compiler
        self.logger = logger or get_logger("strokefont.synthesizer")

    @classmethod
    def default(
        cls,
        settings: StrokeFontSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> "FontSynthesizer":
        """Create a synthesizer wired to skia-pathops and fontTools."""
        settings = settings or StrokeFontSettings()
        return cls(
            settings=settings,
            geometry=PathopsGeometry(),
            compiler=FontToolsCompiler(settings.font),
            logger=logger,
        )

    def ensure_ready(self) -> tuple[GeometryBackend, FontCompiler]:
        """Check that both capabilities are present and ready.

        Raises:
            CapabilityUnavailableError: If either capability is missing or not ready
        """
        if self.geometry is None:
            raise CapabilityUnavailableError("geometry", "not provided")
        if not getattr(self.geometry, "ready", False):
            raise CapabilityUnavailableError("geometry")
        if self.compiler is None:
            raise CapabilityUnavailableError("font compiler", "not provided")
        if not getattr(self.compiler, "ready", False):
            raise CapabilityUnavailableError("font compiler")
        return self.geometry, self.compiler

    def synthesize_glyph(
        self,
        char: str,
        strokes: list[Stroke],
        metadata: FontMetadata | None = None,
    ) -> EncodedGlyph | None:
        """Synthesize a single glyph without building a font.

        Returns:
            The encoded glyph, or None if the character produces no outline
        """
        geometry, _ = self.ensure_ready()
        outcome = synthesize_character(
            char, strokes, metadata or FontMetadata(), self.settings, geometry
        )
        return outcome.glyph

    def synthesize(
        self,
        glyph_data: GlyphData,
        metadata: FontMetadata | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> SynthesisResult:
        """Build a complete font from a stroke snapshot.

        Args:
            glyph_data: Mapping of character to strokes
            metadata: Naming and generation options
            max_workers: Worker processes (None = config default)
            progress_callback: Optional callback(completed, total, char, success)

        Returns:
            SynthesisResult with the font bytes

        Raises:
            CapabilityUnavailableError: If a capability is not ready
            FontEncodingError: If serialization fails
        """
        geometry, compiler = self.ensure_ready()
        metadata = metadata or FontMetadata()
        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        synthesis_logger = SynthesisLogger(self.logger)
        stats = synthesis_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting synthesis",
            characters=len(glyph_data),
            family=metadata.family_name,
            style=metadata.style_name,
            auto_scale=metadata.auto_scale,
            weight_multiplier=metadata.weight_multiplier,
            max_workers=max_workers,
        )

        tasks = {
            char: [s.to_dict() for s in strokes]
            for char, strokes in glyph_data.items()
            if strokes
        }
        for char, strokes in glyph_data.items():
            if strokes:
                synthesis_logger.log_glyph_start(char, len(strokes))
            else:
                synthesis_logger.log_glyph_skipped(char, "no strokes")

        metadata_dict = metadata.model_dump()
        settings_dict = self.settings.model_dump()

        if max_workers == 1 or len(tasks) <= 1:
            results = self._run_sequential(
                tasks, metadata_dict, settings_dict, geometry, progress_callback
            )
        else:
            results = self._run_parallel(
                tasks, metadata_dict, settings_dict, geometry, max_workers, progress_callback
            )

        glyphs: list[EncodedGlyph] = []
        for char in tasks:
            result = results[char]
            if "error" in result:
                synthesis_logger.log_glyph_error(
                    char,
                    Exception(result["error"]),
                    traceback=result.get("traceback"),
                )
            elif "skipped" in result:
                synthesis_logger.log_glyph_skipped(char, result["skipped"])
            else:
                glyph = EncodedGlyph.from_dict(result["glyph"])
                glyphs.append(glyph)
                synthesis_logger.log_glyph_complete(
                    char,
                    contours=glyph.contour_count,
                    advance_width=glyph.advance_width,
                    merged=glyph.merged,
                    unresolved_ribbons=result["unresolved_ribbons"],
                    duration_ms=result["duration_ms"],
                )

        buffer = FontAssembler(compiler, self.settings.font).assemble(glyphs, metadata)

        stats.end_time = time.time()
        self.logger.info(
            "Synthesis complete",
            built=stats.built_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            merge_fallbacks=stats.merge_fallbacks,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return SynthesisResult(buffer=buffer, glyphs=glyphs, stats=stats)

    def build_font_buffer(self, glyph_data: GlyphData, metadata: FontMetadata | None = None) -> bytes:
        """Build a font and return only its bytes."""
        return self.synthesize(glyph_data, metadata).buffer

    def export(
        self,
        glyph_data: GlyphData,
        metadata: FontMetadata,
        output_dir: Path,
        include_bold: bool = False,
    ) -> list[Path]:
        """Write the font (and optionally its bold variant) to disk.

        Returns:
            Paths of the written files, regular first
        """
        writer = FontWriter(output_dir)
        variants = [metadata]
        if include_bold:
            variants.append(metadata.bold(self.settings.stroke.bold_multiplier))

        paths = []
        for variant in variants:
            buffer = self.build_font_buffer(glyph_data, variant)
            path = writer.write(buffer, variant)
            self.logger.info("Font saved", output=str(path), size=len(buffer))
            paths.append(path)
        return paths

    def preview(
        self,
        glyph_data: GlyphData,
        session: PreviewSession,
        metadata: FontMetadata | None = None,
    ) -> PreviewHandle:
        """Build a font and publish it as the session's live preview.

        The previous preview of the session is released first. If the build
        fails the previous preview stays live.
        """
        buffer = self.build_font_buffer(glyph_data, metadata)
        return session.refresh(buffer)

    def _run_sequential(
        self,
        tasks: dict[str, list[dict[str, Any]]],
        metadata_dict: dict[str, Any],
        settings_dict: dict[str, Any],
        geometry: GeometryBackend,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[str, dict[str, Any]]:
        results: dict[str, dict[str, Any]] = {}
        total = len(tasks)
        for completed, (char, stroke_dicts) in enumerate(tasks.items(), start=1):
            result = process_character(char, stroke_dicts, metadata_dict, settings_dict, geometry)
            results[char] = result
            if progress_callback is not None:
                progress_callback(completed, total, char, "glyph" in result)
        return results

    def _run_parallel(
        self,
        tasks: dict[str, list[dict[str, Any]]],
        metadata_dict: dict[str, Any],
        settings_dict: dict[str, Any],
        geometry: GeometryBackend,
        max_workers: int | None,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[str, dict[str, Any]]:
        """Process characters in worker processes.

        Results are keyed by character so the caller can restore input order.
        """
        results: dict[str, dict[str, Any]] = {}
        total = len(tasks)
        completed = 0

        self.logger.info("Starting parallel synthesis", characters=total, max_workers=max_workers)

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            pending = {
                executor.submit(
                    process_character,
                    char,
                    stroke_dicts,
                    metadata_dict,
                    settings_dict,
                    geometry,
                ): char
                for char, stroke_dicts in tasks.items()
            }

            for future in as_completed(pending):
                char = pending[future]
                try:
                    result = future.result()
                except Exception as e:
                    # executor-level failure, the character is dropped
                    result = {
                        "error": str(e),
                        "error_type": type(e).__name__,
                        "traceback": traceback.format_exc(),
                        "duration_ms": 0.0,
                    }
                results[char] = result

                completed += 1
                if progress_callback is not None:
                    progress_callback(completed, total, char, "glyph" in result)

        return results
