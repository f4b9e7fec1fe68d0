#!/usr/bin/env python3
"""
Example: electromagnetic report for a 10 HP, 4-pole motor.

Runs both formula sets: the staged pipeline on measured core data and the
rated-physics approximation on nameplate values, then prints the results
and alerts of each.
"""

from pathlib import Path
import sys

# Allow running directly from the repository root.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from motor_calculator import (
    calculate_motor,
    compute,
    configure_logging,
    create_specification,
)


def _print_section(title: str) -> None:
    line = "=" * 70
    print(f"\n{line}\n{title}\n{line}")


def _print_alerts(alerts) -> None:
    if not alerts:
        print("\nNo alerts.")
        return
    print("\nAlerts:")
    for alert in alerts:
        print(f"  [{alert.severity.value.upper():>8}] {alert.parameter}: {alert.message}")


def core_data_report() -> None:
    spec = create_specification(
        model="Test4P",
        power_hp=10,
        power_factor=0.85,
        rpm=1800,
        poles=4,
        efficiency=0.9,
        frequency=60,
        voltage_delta=380,
        voltage_star=220,
        current_delta=15,
        current_star=26,
        slot_depth=0.02,         # [m]
        crown_height=0.015,      # [m]
        stator_tooth_width=0.008,
        number_of_slots=36,
        stack_length=0.12,
        internal_diameter=0.08
    )
    results = compute(spec, verbose=True)

    _print_section(f"CORE DATA CALCULATION - {spec.model}")
    print(f"Synchronous speed:    {spec.synchronous_speed:.0f} rpm (slip {spec.slip:.2%})")
    print(f"Flux per pole:        {results.flux_per_pole:.6f} Wb")
    print(f"Total flux:           {results.total_flux:.6f} Wb")
    print(f"B air gap:            {results.air_gap_induction:.3f} T")
    print(f"B stator tooth:       {results.stator_tooth_induction:.3f} T")
    print(f"B stator crown:       {results.stator_crown_induction:.3f} T")
    print(f"q / Kd / Kw:          {results.slots_per_pole_per_phase:.2f} / "
          f"{results.distribution_factor:.4f} / {results.winding_factor:.4f}")
    print(f"Turns per phase:      {results.turns_per_phase}")
    print(f"Wire section:         {results.wire_section:.2f} mm² ({results.awg_size})")
    print(f"Phase resistance:     {results.resistance_per_phase * 1e3:.3f} mΩ")
    print(f"Joule losses:         {results.joule_losses:.2f} W")
    print(f"Specific power:       {results.specific_power / 1e3:.1f} kW/m³")
    print(f"THD:                  {results.total_harmonic_distortion:.2%}")
    _print_alerts(results.alerts)


def rated_report() -> None:
    response = calculate_motor(dict(
        name="W22 10CV",
        power_rating=10,
        power_unit='CV',
        voltage=380,
        frequency=60,
        poles=4,
        efficiency=0.92,
        power_factor=0.86,
        current_density=5.0,     # above the recommended 4.5 A/mm²
        diameter=200,            # [mm]
        length=250,
        air_gap_length=0.5
    ))

    _print_section("RATED CALCULATION - W22 10CV")
    if not response['success']:
        print(f"Request rejected: {response.get('errors') or response.get('error_message')}")
        return

    results = response['results']
    print(f"Rated torque:         {results['rated_torque']:.1f} N·m")
    print(f"Flux per pole:        {results['flux_per_pole'] * 1e3:.3f} mWb")
    print(f"B air gap:            {results['air_gap_induction']:.4f} T")
    print(f"Turns per phase:      {results['turns_per_phase']:.1f}")
    print(f"Induced voltage:      {results['induced_voltage']:.1f} V")
    print(f"Specific power:       {results['specific_power']:.3f} kW/kg")
    for warning in response['warnings']:
        print(f"  [ REQUEST] {warning['field']}: {warning['message']}")
    for alert in results['alerts']:
        print(f"  [{alert['severity'].upper():>8}] {alert['parameter']}: {alert['message']}")


def main() -> None:
    configure_logging()
    core_data_report()
    rated_report()


if __name__ == "__main__":
    main()
