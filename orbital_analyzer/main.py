# orbital_analyzer/main.py
import logging
import traceback

from orbital_analyzer.cli import run_cli
from orbital_analyzer.config import settings
from orbital_analyzer.physics.circular_orbit import compute_orbit
from orbital_analyzer.simulation.tracker import run_tracker
from orbital_analyzer.visualization.plots import plot_orbit_profile, plot_ground_track

# --- Setup logger ------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%H:%M:%S"
)
log = logging.getLogger("main")


def print_orbit(altitude_km):
    res = compute_orbit(altitude_km)
    print("\n================ ORBITAL SIMULATOR ================\n")
    if not res.ok:
        print(f"Altitude           : {altitude_km} km")
        print(f"Rejected           : {res.rejection.value}")
        return None
    p = res.params
    print(f"Altitude           : {p.altitude_km:.0f} km")
    print(f"Orbital Velocity   : {p.orbital_speed_km_s:.2f} km/s")
    print(f"Period (T)         : {p.period_min:.2f} min")
    print(f"Revolutions / day  : {p.revolutions_per_day:.2f}")
    if p.extrapolated:
        print("Note               : outside advisory range (extrapolated)")
    print("-" * 51)
    return p


def main():
    try:
        settings.validate_settings()

        # 1) Inputs
        altitude, polls, interval = run_cli()
        log.info("Starting: altitude=%s km, polls=%d, interval=%.1fs", altitude, polls, interval)

        # 2) Circular-orbit simulation for the chosen altitude
        print_orbit(altitude)

        # 3) Real-time tracking
        if polls > 0:
            print("\n================ REAL-TIME DATA ================\n")
        run = run_tracker(
            polls,
            interval_sec=interval,
            frame=(settings.MAP_WIDTH_PX, settings.MAP_HEIGHT_PX),
        )
        s = run["summary"]
        if s["samples"]:
            v = s["last_velocity_km_s"]
            print(f"\nSamples: {s['samples']}  accepted: {s['accepted']}  rejected: {s['rejected']}  faults: {s['faults']}")
            print(f"Ground track: {s['track_length_km']:.1f} km  last velocity: {'--.--' if v is None else f'{v:.2f}'} km/s")

        # 4) Plots (best-effort)
        try:
            plot_orbit_profile(altitude)
            plot_ground_track(run["cycles"], settings.MAP_WIDTH_PX, settings.MAP_HEIGHT_PX)
            log.info("Plots generated.")
        except Exception as e:
            log.warning("Plotting failed: %s", e)

    except KeyboardInterrupt:
        log.info("Interrupted.")
    except Exception:
        log.error("Fatal exception during run:")
        traceback.print_exc()


if __name__ == "__main__":
    main()
