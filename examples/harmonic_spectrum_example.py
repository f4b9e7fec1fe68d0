#!/usr/bin/env python3
"""
Example script comparing the harmonic winding factors of several slot counts.

For a 4-pole machine, computes the 5th to 17th harmonic winding factors of
full-pitch windings with different numbers of slots, and plots them next
to the typical short-pitched winding used by the rated approximation.
"""

from pathlib import Path
import sys
from typing import Sequence

import matplotlib.pyplot as plt

# Allow running directly from the repository root.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from motor_calculator import WindingConfiguration
from motor_calculator.calculations import typical_harmonics
from motor_calculator.utils import DesignLimits, HARMONIC_ORDERS

POLES = 4
SLOT_COUNTS = [24, 36, 48, 72]
BAR_WIDTH = 0.8 / (len(SLOT_COUNTS) + 1)


def summarize(slot_counts: Sequence[int]) -> None:
    print(f"{'Slots':>6} {'q':>6} {'Kw':>8} " +
          " ".join(f"{'h' + str(h):>7}" for h in HARMONIC_ORDERS) + f" {'THD':>8}")
    print("-" * 80)
    for slots in slot_counts:
        winding = WindingConfiguration(slots, POLES)
        harmonics = winding.harmonics()
        print(
            f"{slots:>6} "
            f"{winding.q:>6.2f} "
            f"{winding.winding_factor:>8.4f} " +
            " ".join(f"{v:>7.4f}" for v in harmonics.by_order().values()) +
            f" {harmonics.total_harmonic_distortion:>8.2%}"
        )


def plot_spectrum(slot_counts: Sequence[int]) -> None:
    positions = list(range(len(HARMONIC_ORDERS)))
    fig, (ax_bars, ax_thd) = plt.subplots(1, 2, figsize=(13, 5))

    thd_values = []
    for i, slots in enumerate(slot_counts):
        harmonics = WindingConfiguration(slots, POLES).harmonics()
        thd_values.append(harmonics.total_harmonic_distortion * 100)
        ax_bars.bar(
            [p + i * BAR_WIDTH for p in positions],
            list(harmonics.by_order().values()),
            width=BAR_WIDTH,
            label=f"{slots} slots"
        )

    typical = typical_harmonics()
    ax_bars.bar(
        [p + len(slot_counts) * BAR_WIDTH for p in positions],
        list(typical.by_order().values()),
        width=BAR_WIDTH,
        color="gray",
        label="Typical (q=3, y=0.8)"
    )
    ax_bars.set_xticks([p + BAR_WIDTH * len(slot_counts) / 2 for p in positions])
    ax_bars.set_xticklabels([str(h) for h in HARMONIC_ORDERS])
    ax_bars.set_xlabel("Harmonic order")
    ax_bars.set_ylabel("|Kd·Kp| [-]")
    ax_bars.set_title("Harmonic winding factors")
    ax_bars.legend()

    ax_thd.plot(slot_counts, thd_values, marker="o", color="tab:red")
    ax_thd.axhline(DesignLimits.THD_MAX * 100, color="gray", linestyle="--", linewidth=0.8)
    ax_thd.set_xlabel("Number of slots")
    ax_thd.set_ylabel("THD [%]")
    ax_thd.set_title("Harmonic distortion vs slots")

    for ax in (ax_bars, ax_thd):
        ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)

    fig.suptitle(f"Full-pitch three-phase windings, {POLES} poles", fontsize=14)
    fig.tight_layout(rect=[0, 0.03, 1, 0.95])
    plt.show()


def main() -> None:
    summarize(SLOT_COUNTS)
    plot_spectrum(SLOT_COUNTS)


if __name__ == "__main__":
    main()
