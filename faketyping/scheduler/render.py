from __future__ import annotations
import asyncio
from typing import Tuple
from PIL import Image, ImageDraw

from .telemetry import KeystrokeRecorder


def _delay_to_rgb(delay, d_min, d_max):
    """
    Map a delay to RGB:
      - short (fast) => green (0, 200, 0)
      - long  (slow) => red   (200, 0, 0)
    """
    if d_max <= d_min:
        t = 0.0
    else:
        t = (delay - d_min) / (d_max - d_min)
    t = max(0.0, min(1.0, t))
    return (int(t * 200), int((1 - t) * 200), 0)


async def save_typing_timeline_jpeg(
    rec: KeystrokeRecorder,
    outfile: str = "typing_timeline.jpg",
    *,
    width: int = 800,
    height: int = 240,
    background_color: Tuple[int, int, int] = (12, 12, 14),
    canvas_margin: int = 20,
    annotate: bool = True,
) -> str:
    """
    Render the planned per-character delays of a session as a bar chart,
    one bar per delay, colored fast (green) to slow (red).
    Rendering is offloaded to a worker thread to avoid blocking the event loop.
    """
    delays_ms = [dt * 1000.0 for dt in rec.planned_delays()]

    def _render() -> str:
        image = Image.new("RGB", (width, height), background_color)
        draw = ImageDraw.Draw(image)

        if not delays_ms:
            if annotate:
                draw.text(
                    (canvas_margin, canvas_margin),
                    "No typing delays recorded",
                    fill=(180, 180, 180),
                )
            image.save(outfile, format="JPEG", quality=92, optimize=True)
            return outfile

        d_min = min(delays_ms)
        d_max = max(delays_ms)
        plot_w = max(1, width - canvas_margin * 2)
        plot_h = max(1, height - canvas_margin * 2 - 16)
        bar_w = plot_w / len(delays_ms)
        top = max(1.0, d_max)

        for i, d in enumerate(delays_ms):
            x0 = canvas_margin + i * bar_w
            x1 = max(x0, x0 + bar_w - 1)
            bar_h = (d / top) * plot_h
            y1 = canvas_margin + plot_h
            y0 = y1 - bar_h
            draw.rectangle(
                [x0, y0, x1, y1], fill=_delay_to_rgb(d, d_min, d_max), outline=None
            )

        draw.line(
            [
                (canvas_margin, canvas_margin + plot_h),
                (canvas_margin + plot_w, canvas_margin + plot_h),
            ],
            fill=(200, 200, 200),
            width=1,
        )

        if annotate:
            avg = sum(delays_ms) / len(delays_ms)
            summary = (
                f"Delays: {len(delays_ms)} | ms min {d_min:.1f} | "
                f"avg {avg:.1f} | max {d_max:.1f}"
            )
            draw.text(
                (canvas_margin, height - canvas_margin - 10),
                summary,
                fill=(200, 200, 200),
            )

        image.save(outfile, format="JPEG", quality=92, optimize=True)
        return outfile

    return await asyncio.to_thread(_render)
