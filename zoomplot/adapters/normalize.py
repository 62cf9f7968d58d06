from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from zoomplot.errors import PlotDataError
from zoomplot.series import SampleSeries


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_samples(samples: Any, *, source_name: str | None = None) -> SampleSeries | None:
    """Coerce host input into a `SampleSeries`.

    Accepts a sequence of ``(x, y)`` pairs, an ``(N, 2)`` array or tensor, or a
    DataFrame with ``x``/``y`` columns (or exactly two numeric columns).
    Returns ``None`` for absent or empty input so callers can treat it as a
    no-op; anything else that is not a finite numeric pair sequence raises
    `PlotDataError`.
    """

    if samples is None:
        return None
    pairs = _coerce_pairs(samples)
    if pairs.shape[0] == 0:
        return None
    if not np.all(np.isfinite(pairs)):
        bad = int(np.flatnonzero(~np.all(np.isfinite(pairs), axis=1))[0])
        raise PlotDataError(f"sample {bad} is not finite: {pairs[bad].tolist()!r}")
    x = np.ascontiguousarray(pairs[:, 0], dtype=np.float64)
    y = np.ascontiguousarray(pairs[:, 1], dtype=np.float64)
    x.setflags(write=False)
    y.setflags(write=False)
    return SampleSeries(x=x, y=y, source_name=source_name)


def _coerce_pairs(value: Any) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _check_pair_shape(tensor.to(torch.float64).numpy())

    if pd is not None and isinstance(value, pd.DataFrame):
        return _pairs_from_frame(value)

    if isinstance(value, np.ndarray):
        return _check_pair_shape(_coerce_ndarray(value))

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.empty((0, 2), dtype=np.float64)
        out = np.empty((len(value), 2), dtype=np.float64)
        for i, item in enumerate(value):
            if isinstance(item, (str, bytes, bytearray)) or not isinstance(item, (Sequence, np.ndarray)):
                raise PlotDataError(f"sample {i} is not an (x, y) pair: {item!r}")
            if len(item) != 2:
                raise PlotDataError(f"sample {i} must have exactly 2 values, got {len(item)}")
            out[i, 0] = _coerce_scalar(item[0], label=f"sample {i} x")
            out[i, 1] = _coerce_scalar(item[1], label=f"sample {i} y")
        return out

    raise PlotDataError(f"unsupported samples input type: {type(value)!r}")


def _pairs_from_frame(frame: Any) -> np.ndarray:
    if "x" in frame.columns and "y" in frame.columns:
        cols = ["x", "y"]
    else:
        cols = [c for c in frame.columns if pd.api.types.is_numeric_dtype(frame[c])]
        if len(cols) != 2:
            raise PlotDataError("DataFrame input needs `x`/`y` columns or exactly two numeric columns")
    return _check_pair_shape(_coerce_ndarray(frame[cols].to_numpy()))


def _check_pair_shape(arr: np.ndarray) -> np.ndarray:
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PlotDataError(f"samples must have shape (N, 2), got {arr.shape}")
    return arr


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    out = np.empty(arr.shape, dtype=np.float64)
    flat_in = arr.reshape(-1)
    flat_out = out.reshape(-1)
    for i, raw in enumerate(flat_in.tolist()):
        flat_out[i] = _coerce_scalar(raw, label=f"value {i}")
    return out


def _coerce_scalar(raw: Any, *, label: str) -> float:
    if raw is None:
        return float("nan")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} is not numeric: {raw!r}") from exc
