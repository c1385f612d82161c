"""Per-pixel luminance remapping through a 256-entry LUT.

For every RGBA pixel:

    L = round(0.299*R + 0.587*G + 0.114*B), clipped to 0-255
    (R', G', B') = lut[L]
    A' = A

Each pixel is independent, so the work can be split into contiguous
chunks on a thread pool (numpy releases the GIL for the heavy parts).
The LUT is only read, never written, so workers share it as-is.

Caller misuse (a buffer that is not whole RGBA pixels, a size mismatch,
a short or malformed LUT) raises ValueError instead of producing
garbage output.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
from PIL import Image

from gradmap.core.lut import LUT_SIZE

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def _check_lut(lut) -> np.ndarray:
    table = np.asarray(lut)
    if table.ndim != 2 or table.shape[1] != 3:
        raise ValueError(f'LUT must be a sequence of RGB triples, got shape {table.shape}')
    if table.shape[0] < LUT_SIZE:
        raise ValueError(f'LUT needs {LUT_SIZE} entries, got {table.shape[0]}')
    if table.dtype != np.uint8:
        if table.min() < 0 or table.max() > 255:
            raise ValueError('LUT channel values must be within 0-255')
        table = table.astype(np.uint8)
    return table[:LUT_SIZE]


def _as_uint8(pixels: np.ndarray) -> np.ndarray:
    if pixels.dtype == np.uint8:
        return pixels
    if pixels.size and (pixels.min() < 0 or pixels.max() > 255):
        raise ValueError('pixel channel values must be within 0-255')
    return pixels.astype(np.uint8)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """ITU-R 601 luma of an (..., 3) array as uint8 levels, rounded half up."""
    rgb = np.asarray(rgb, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    weighted = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]
    return np.clip(np.floor(weighted + 0.5), 0, LUT_SIZE - 1).astype(np.uint8)


def _remap_chunk(src: np.ndarray, dst: np.ndarray, table: np.ndarray, start: int, stop: int) -> None:
    dst[start:stop, :3] = table[luminance(src[start:stop, :3])]


def _chunk_bounds(count: int, workers: int) -> list[tuple[int, int]]:
    edges = np.linspace(0, count, workers + 1, dtype=int)
    return [(int(a), int(b)) for a, b in zip(edges, edges[1:]) if b > a]


def remap_array(rgba: np.ndarray, lut, workers: int = 1) -> np.ndarray:
    """Remap an (..., 4) RGBA array. Returns a new uint8 array of the same shape."""
    src = _as_uint8(np.asarray(rgba))
    if src.ndim == 0 or src.shape[-1] != 4:
        raise ValueError(f'expected RGBA data with 4 channels in the last axis, got shape {src.shape}')
    if workers < 1:
        raise ValueError(f'workers must be >= 1, got {workers}')
    table = _check_lut(lut)

    flat = src.reshape(-1, 4)
    out = np.empty_like(flat)
    out[:, 3] = flat[:, 3]

    bounds = _chunk_bounds(len(flat), workers)
    if workers == 1 or len(bounds) <= 1:
        for start, stop in bounds:
            _remap_chunk(flat, out, table, start, stop)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(_remap_chunk, flat, out, table, start, stop) for start, stop in bounds]
            for future in futures:
                future.result()

    return out.reshape(src.shape)


def remap(pixels, width: int, height: int, lut, workers: int = 1) -> bytes:
    """Remap an interleaved RGBA byte buffer of width x height pixels."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels).reshape(-1)

    if len(flat) % 4 != 0:
        raise ValueError(f'pixel buffer length {len(flat)} is not a multiple of 4')
    if width < 0 or height < 0:
        raise ValueError(f'invalid dimensions {width}x{height}')
    if len(flat) != width * height * 4:
        raise ValueError(f'pixel buffer length {len(flat)} does not match {width}x{height} RGBA')

    return remap_array(flat.reshape(-1, 4), lut, workers=workers).tobytes()


def remap_image(image: Image.Image, lut, workers: int = 1) -> Image.Image:
    """Remap a PIL image. The result is always RGBA."""
    rgba = np.array(image.convert('RGBA'))
    return Image.fromarray(remap_array(rgba, lut, workers=workers))
