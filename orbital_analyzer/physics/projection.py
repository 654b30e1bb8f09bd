# orbital_analyzer/physics/projection.py
import numpy as np

from orbital_analyzer.models.sample import GeoSample, ProjectedPoint


def _check_frame(frame_width_px, frame_height_px):
    w = int(frame_width_px)
    h = int(frame_height_px)
    if w <= 0 or h <= 0:
        raise ValueError(f"frame must be positive, got {frame_width_px}x{frame_height_px}")
    return w, h


def project_many(latitudes, longitudes, frame_width_px, frame_height_px):
    """
    Equirectangular projection onto a w x h pixel frame (origin top-left).
        x = round((lon + 180) * w / 360)
        y = round((90 - lat) * h / 180)
    Rounds half up, then clips into [0, w-1] x [0, h-1] (lon=180 / lat=-90 land on the last pixel).
    Returns (xs, ys) as int numpy arrays.
    """
    w, h = _check_frame(frame_width_px, frame_height_px)
    lat = np.asarray(latitudes, dtype=float)
    lon = np.asarray(longitudes, dtype=float)
    if not (np.all(np.isfinite(lat)) and np.all(np.isfinite(lon))):
        raise ValueError("latitudes and longitudes must be finite")

    xs = np.floor((lon + 180.0) * (w / 360.0) + 0.5)
    ys = np.floor((90.0 - lat) * (h / 180.0) + 0.5)

    xs = np.clip(xs, 0, w - 1).astype(int)
    ys = np.clip(ys, 0, h - 1).astype(int)
    return xs, ys


def project(sample: GeoSample, frame_width_px: int, frame_height_px: int) -> ProjectedPoint:
    xs, ys = project_many(sample.latitude, sample.longitude, frame_width_px, frame_height_px)
    return ProjectedPoint(x=int(xs), y=int(ys))
