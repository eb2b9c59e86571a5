import math

def adjust_exposure_time(exposure_time: float, delta_ev: float) -> float:
    """Apply an EV change to an exposure time (seconds)."""
    return exposure_time * 2 ** delta_ev

def delta_ev_to_seconds(exposure_time: float, delta_ev: float) -> float:
    """How many seconds an EV change adds to (or removes from) an exposure time."""
    return adjust_exposure_time(exposure_time, delta_ev) - exposure_time

def time_difference_to_delta_ev(exposure_time1: float, exposure_time2: float) -> float:
    """Difference between two exposure times, in EV."""
    return math.log2(exposure_time2 / exposure_time1)

def exposure_value(f_stop: float, exposure_time: float) -> float:
    """Compute Exposure Value (EV) from f-stop and exposure time in seconds."""
    return math.log2((f_stop ** 2) / exposure_time)

def iso_delta_ev(from_iso: float, to_iso: float) -> float:
    """EV shift caused by changing film/sensor sensitivity."""
    return math.log2(to_iso / from_iso)

def convert_iso(ev: float, from_iso: float, to_iso: float) -> float:
    """Adjust EV for a new ISO."""
    return ev + iso_delta_ev(from_iso, to_iso)

def exposure_time_for_ev(ev: float, f_stop: float) -> float:
    """Compute exposure time (seconds) from EV and f-stop."""
    return (f_stop ** 2) / (2 ** ev)

def f_stop_for_ev(ev: float, exposure_time: float) -> float:
    """Compute f-stop from EV and exposure time (seconds)."""
    return math.sqrt((2 ** ev) * exposure_time)
