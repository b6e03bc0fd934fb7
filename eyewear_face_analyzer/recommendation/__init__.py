"""Frame recommendation engine"""

from .frame_logic import (
    analyze_bridge_fit,
    analyze_prescription,
    calculate_frame_size,
    get_enhanced_recommendations,
    get_frame_suggestions,
)

__all__ = [
    'analyze_bridge_fit',
    'analyze_prescription',
    'calculate_frame_size',
    'get_enhanced_recommendations',
    'get_frame_suggestions',
]
