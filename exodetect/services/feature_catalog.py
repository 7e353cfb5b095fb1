"""
Fixed catalog of engineered features.

Each raw measurement feeds exactly one engineered feature through a fixed
scalar transform, so the feature count always equals the measurement count.
"""

FEATURE_TRANSFORMS = {
    'orbital_period_scaled': ('orbital_period', lambda value: value * 2),
    'transit_duration_halved': ('transit_duration', lambda value: value / 2),
    'planetary_radius_shifted': ('planetary_radius', lambda value: value + 1),
    'transit_depth_shifted': ('transit_depth', lambda value: value - 1),
    'snr_amplified': ('snr', lambda value: value * 10),
}

FEATURE_CATEGORIES = {
    'orbital': ['orbital_period_scaled'],
    'transit': ['transit_duration_halved', 'transit_depth_shifted'],
    'planet': ['planetary_radius_shifted'],
    'quality': ['snr_amplified'],
}

FEATURE_DESCRIPTIONS = {
    'orbital_period_scaled': 'Orbital period of the planet, doubled',
    'transit_duration_halved': 'Duration of the transit, halved',
    'planetary_radius_shifted': 'Planet radius in relation to Earth, shifted by one',
    'transit_depth_shifted': 'Transit depth in parts per million, shifted by one',
    'snr_amplified': 'Signal-to-noise ratio of the transit, scaled by ten',
}


def get_feature_category(feature_name):
    """Return the category of a feature"""
    for category, features in FEATURE_CATEGORIES.items():
        if feature_name in features:
            return category
    return 'other'


def get_feature_description(feature_name):
    """Return the description of a feature"""
    return FEATURE_DESCRIPTIONS.get(feature_name, f'Feature: {feature_name}')
