import os

import numpy as np
import matplotlib.pyplot as plt

from orbital_analyzer.config.settings import (
    OUTPUT_DIR,
    ALTITUDE_SLIDER_MIN_KM,
    ALTITUDE_SLIDER_MAX_KM,
    MAP_WIDTH_PX,
    MAP_HEIGHT_PX,
)
from orbital_analyzer.physics.circular_orbit import compute_orbit, orbit_profile
from orbital_analyzer.physics.projection import project_many
from orbital_analyzer.simulation.tracker import track_segments


def plot_orbit_profile(selected_altitude_km=None, out_dir=None):
    """
    Orbital speed and period vs altitude over the slider range, selected altitude marked.
    """
    out_dir = out_dir or OUTPUT_DIR
    os.makedirs(out_dir, exist_ok=True)

    alts = np.linspace(ALTITUDE_SLIDER_MIN_KM, ALTITUDE_SLIDER_MAX_KM, 201)
    prof = orbit_profile(alts)

    fig, ax_v = plt.subplots(figsize=(9, 5))
    ax_t = ax_v.twinx()

    ax_v.plot(prof["altitude_km"], prof["speed_km_s"], color="tab:blue", label="Orbital speed")
    ax_t.plot(prof["altitude_km"], prof["period_min"], color="tab:orange", label="Period")

    if selected_altitude_km is not None:
        res = compute_orbit(selected_altitude_km)
        if res.ok:
            p = res.params
            ax_v.axvline(p.altitude_km, color="grey", linestyle="--", linewidth=1)
            ax_v.annotate(
                f"{p.altitude_km:.0f} km\n{p.orbital_speed_km_s:.2f} km/s\n"
                f"{p.period_min:.2f} min\n{p.revolutions_per_day:.2f} rev/day",
                xy=(p.altitude_km, p.orbital_speed_km_s),
                xytext=(10, 10),
                textcoords="offset points",
                fontsize=8,
            )

    ax_v.set_xlabel("Altitude (km)")
    ax_v.set_ylabel("Orbital speed (km/s)", color="tab:blue")
    ax_t.set_ylabel("Period (min)", color="tab:orange")
    ax_v.set_title("Circular Orbit vs Altitude")

    save_path = os.path.join(out_dir, "orbit_profile.png")
    fig.tight_layout()
    fig.savefig(save_path)
    plt.close(fig)

    print(f"[OK] Saved: {save_path}")
    return save_path


def plot_ground_track(cycles, width=MAP_WIDTH_PX, height=MAP_HEIGHT_PX, out_dir=None):
    """
    Projected positions on the pixel frame, image-style axes (row 0 at the top).
    Rejected samples are drawn in grey.
    """
    out_dir = out_dir or OUTPUT_DIR
    os.makedirs(out_dir, exist_ok=True)

    fixes = [c for c in cycles if not c.get("error")]
    if not fixes:
        print("[--] No positions to plot.")
        return None

    lats = [c["latitude"] for c in fixes]
    lons = [c["longitude"] for c in fixes]
    xs, ys = project_many(lats, lons, width, height)
    rejected = np.array([c.get("outcome") == "rejected" for c in fixes], dtype=bool)

    fig, ax = plt.subplots(figsize=(width / 100.0, height / 100.0 + 0.6))
    ax.set_xlim(0, width - 1)
    ax.set_ylim(height - 1, 0)
    ax.set_facecolor("#d3d3d3")
    ax.grid(True, alpha=0.4)

    # line only along accepted legs; breaks at rejections and outages
    for seg in track_segments(cycles):
        if len(seg) < 2:
            continue
        sx, sy = project_many([s.latitude for s in seg], [s.longitude for s in seg], width, height)
        ax.plot(sx, sy, color="tab:red", linewidth=0.8, alpha=0.6)
    ax.scatter(xs[~rejected], ys[~rejected], s=12, color="red", label="fix")
    if rejected.any():
        ax.scatter(xs[rejected], ys[rejected], s=12, color="grey", label="rejected")

    ax.set_xlabel("x (px)")
    ax.set_ylabel("y (px)")
    ax.set_title("ISS Ground Track (equirectangular)")
    ax.legend(fontsize=8, loc="lower right")

    save_path = os.path.join(out_dir, "ground_track.png")
    fig.tight_layout()
    fig.savefig(save_path)
    plt.close(fig)

    print(f"[OK] Saved: {save_path}")
    return save_path
