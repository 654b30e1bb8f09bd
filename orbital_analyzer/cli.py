# orbital_analyzer/cli.py
import math

from orbital_analyzer.config import settings
from orbital_analyzer.config.settings import (
    DEFAULT_ALTITUDE_KM,
    ALTITUDE_SLIDER_MIN_KM,
    ALTITUDE_SLIDER_MAX_KM,
    DEFAULT_POLLS,
    MAX_POLLS,
    POLL_INTERVAL_SEC,
    POLL_INTERVAL_MIN,
    POLL_INTERVAL_MAX,
    clamp_altitude,
    clamp_poll_interval,
)


def _ask(prompt):
    """input() that reports a closed stdin as None (non-interactive runs take defaults)."""
    try:
        return input(prompt)
    except EOFError:
        return None


def get_number(prompt, default, min_val=None, max_val=None, unit=""):
    """
    Read a float within [min_val, max_val]; Enter or EOF keeps the default.
    Out-of-range and non-numeric answers are asked again.
    """
    while True:
        user = _ask(prompt)
        if user is None or user.strip() == "":
            return float(default)
        try:
            val = float(user)
            if not math.isfinite(val):
                raise ValueError
        except ValueError:
            print(f"❌ '{user.strip()}' is not a number.")
            continue
        if (min_val is not None and val < min_val) or (max_val is not None and val > max_val):
            print(f"❌ Must be between {min_val:g} and {max_val:g}{unit}.")
            continue
        return val


def get_count(prompt, default, max_val):
    """Whole number of polls in [0, max_val]; Enter or EOF keeps the default."""
    while True:
        user = _ask(prompt)
        if user is None or user.strip() == "":
            return int(default)
        try:
            val = int(user)
        except ValueError:
            print("❌ Enter a whole number of polls.")
            continue
        if not 0 <= val <= max_val:
            print(f"❌ Poll count must be between 0 and {max_val}.")
            continue
        return val


def ask_altitude():
    """Altitude for the orbital simulator (slider range, km)."""
    print("\n🛰️ Orbital Simulator")
    alt = get_number(
        f"Altitude ({ALTITUDE_SLIDER_MIN_KM}–{ALTITUDE_SLIDER_MAX_KM} km) [default {DEFAULT_ALTITUDE_KM}]: ",
        default=DEFAULT_ALTITUDE_KM,
        min_val=ALTITUDE_SLIDER_MIN_KM,
        max_val=ALTITUDE_SLIDER_MAX_KM,
        unit=" km",
    )
    return clamp_altitude(alt)


def ask_polling():
    print("\n📡 Real-time tracking (Open-Notify)")
    polls = get_count(
        f"Number of polls (0–{MAX_POLLS}, 0 = simulator only) [default {DEFAULT_POLLS}]: ",
        default=DEFAULT_POLLS,
        max_val=MAX_POLLS,
    )
    interval = get_number(
        f"Poll interval ({POLL_INTERVAL_MIN:g}–{POLL_INTERVAL_MAX:g} s) [default {POLL_INTERVAL_SEC:g}]: ",
        default=POLL_INTERVAL_SEC,
        min_val=POLL_INTERVAL_MIN,
        max_val=POLL_INTERVAL_MAX,
        unit=" s",
    )
    return polls, clamp_poll_interval(interval)


def run_cli():
    print("======================================")
    print("     ISS ORBITAL ANALYZER (CLI)       ")
    print("======================================")

    altitude = ask_altitude()
    polls, interval = ask_polling()

    # Runtime values go back into settings (single place of truth)
    setattr(settings, "DEFAULT_ALTITUDE_KM", int(altitude))
    setattr(settings, "POLL_INTERVAL_SEC", float(interval))

    print("\n✅ CLI input complete.")
    print(f"→ Altitude: {altitude} km")
    print(f"→ Polls: {polls} every {interval:g} s")

    return altitude, polls, interval
