"""
Physical constants, lookup tables and engineering limits for motor calculations.
"""

import math
from types import MappingProxyType

# =============================================================================
# PHYSICAL CONSTANTS
# =============================================================================

SQRT_3 = math.sqrt(3)
RHO_COPPER = 1.68e-8        # Copper resistivity at 20°C [Ω·m]
EMF_CONSTANT = 4.44         # E = 4.44 * f * N * Φ * Kw
DENSITY_STEEL = 7800        # Core steel density [kg/m³]
WATTS_PER_HP = 736          # Conversion used by the staged pipeline [W/HP]
MM2_TO_M2 = 1e-6


# =============================================================================
# POWER UNITS
# =============================================================================

POWER_UNIT_TO_WATTS = MappingProxyType({
    'CV': 735.5,
    'HP': 746,
    'kW': 1000,
    'W': 1,
})


# =============================================================================
# PIPELINE SEEDS
# =============================================================================

# Flux, turns and winding factor depend on each other; these break the cycle
SEED_TURNS_PER_PHASE = 100
SEED_WINDING_FACTOR = 0.9

# Full-pitch winding assumption
FULL_PITCH_FACTOR = 1.0

# Conductor cross-section used before wire sizing [m²]
PLACEHOLDER_WIRE_SECTION = 1e-6

# Conservative continuous-duty current density [A/mm²]
WIRE_CURRENT_DENSITY = 4.5

HARMONIC_ORDERS = (5, 7, 11, 13, 17)


# =============================================================================
# RATED-PHYSICS APPROXIMATIONS
# =============================================================================

REFERENCE_POWER = 1000      # [W]
REFERENCE_FLUX = 0.001      # [Wb]
REFERENCE_FREQUENCY = 50    # [Hz]
REFERENCE_POLES = 4
TOOTH_AREA_RATIO = 0.7      # Tooth area / air gap area
YOKE_AREA_RATIO = 0.3       # Yoke area / air gap area
TYPICAL_PITCH_FACTOR = 0.966
TYPICAL_DISTRIBUTION_FACTOR = 0.956
TYPICAL_SLOTS_PER_POLE = 3
TYPICAL_SHORT_PITCH = 0.8
EMF_WINDING_FACTOR = 0.9


# =============================================================================
# AWG TABLE (area [mm²], label), ordered from thinnest to thickest
# =============================================================================

AWG_TABLE = (
    (0.05, '30 AWG'), (0.08, '28 AWG'), (0.13, '26 AWG'), (0.20, '24 AWG'),
    (0.32, '22 AWG'), (0.51, '20 AWG'), (0.82, '18 AWG'), (1.31, '16 AWG'),
    (2.08, '14 AWG'), (3.31, '12 AWG'), (5.26, '10 AWG'), (8.37, '8 AWG'),
    (13.3, '6 AWG'), (21.1, '4 AWG'), (33.6, '2 AWG'), (42.4, '1 AWG'),
    (53.5, '1/0 AWG'), (67.4, '2/0 AWG'), (85.0, '3/0 AWG'), (107.0, '4/0 AWG'),
)


# =============================================================================
# ENGINEERING LIMITS (for validation alerts)
# =============================================================================

class DesignLimits:
    """Thresholds applied to computed results and to incoming requests."""

    # Input screening inside the engine
    EFFICIENCY_MIN = 0.80
    EFFICIENCY_MAX = 1.05
    POWER_FACTOR_MIN = 0.1
    POWER_FACTOR_MAX = 1.0

    # Magnetic saturation [T]
    TOOTH_INDUCTION_MAX = 1.8
    CROWN_INDUCTION_MAX = 1.6
    AIR_GAP_INDUCTION_MAX = 1.1
    AIR_GAP_INDUCTION_RECOMMENDED = 0.8

    # Current density [A/mm²]
    CURRENT_DENSITY_WARNING = 6.0
    CURRENT_DENSITY_RECOMMENDED = 4.5
    CURRENT_DENSITY_MAX = 6.5

    # Specific power [W/m³]
    SPECIFIC_POWER_MIN = 100000
    SPECIFIC_POWER_MAX = 500000
    SPECIFIC_POWER_OVERSIZED = 50000
    SPECIFIC_POWER_UNDERSIZED = 600000

    # Total harmonic distortion (fraction)
    THD_MAX = 0.10

    # Outer request gate
    REQUEST_EFFICIENCY_MIN = 0.90
    REQUEST_EFFICIENCY_MAX = 1.05
    RECOMMENDED_EFFICIENCY = (0.92, 0.98)
    RECOMMENDED_POWER_FACTOR = (0.8, 0.95)
    POWER_FACTOR_WARNING = 0.8

    # Length / diameter
    ASPECT_RATIO_MIN = 0.5
    ASPECT_RATIO_MAX = 3.0

    # Hard structural bounds
    NAME_MAX_LENGTH = 100
    POWER_MAX = 10000
    FREQUENCY_MAX = 400
    POLES_MIN = 2
    POLES_MAX = 100
    SPEC_EFFICIENCY_MAX = 1.05
    COMMON_FREQUENCIES = (50, 60)
    COMMON_POLES = (2, 4, 6, 8)
