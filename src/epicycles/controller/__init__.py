from epicycles.controller.engines import (
    AnimationEngine, DecompositionEngine, DecompositionFrame, EpicycleEngine, EpicycleFrame, GeneralizationEngine,
    ViewportGeometry,
)
from epicycles.controller.scheduler import FrameScheduler, FrameSurface
