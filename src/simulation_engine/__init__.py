from src.simulation_engine.burst_simulator import BurstSimulator
from src.simulation_engine.comparison import compare_results
from src.simulation_engine.curve_adjuster import BurstCurveAdjuster
from src.simulation_engine.models import BurstResult, CharacterRecord, Failure

__all__ = [
    "BurstCurveAdjuster",
    "BurstResult",
    "BurstSimulator",
    "CharacterRecord",
    "Failure",
    "compare_results",
]
