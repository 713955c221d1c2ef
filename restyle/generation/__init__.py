"""Room, garden and exterior redesign via the Runware API."""

from .schemas import (
    ColorPalette,
    TargetColor,
    FloorStyle,
    StyleTransformRequest,
    InpaintRequest,
    ExteriorRequest,
    RepaintRequest,
    RefloorRequest,
    StyleTransferRequest,
    FreeformRequest,
    GenerationRequest,
    parse_generation_request,
)
from .prompt_templates import (
    STYLE_PROMPTS,
    ROOM_PROMPTS,
    HOUSE_TYPE_PROMPTS,
    slugify,
)
from .prompt_builder import (
    build_prompt,
    build_style_transform_prompt,
    build_inpaint_prompt,
    build_exterior_prompt,
    build_repaint_prompt,
    build_refloor_prompt,
    build_style_transfer_prompt,
    build_freeform_prompt,
)
from .progress import (
    ProgressCurve,
    ProgressEstimator,
    PRIMARY_CURVE,
    EDIT_CURVE,
)
from .errors import ErrorKind, GenerationError
from .variants import VARIANTS, TaskVariant, build_task
from .runware_client import RunwareClient, GenerationResult

__all__ = [
    # Requests
    "ColorPalette",
    "TargetColor",
    "FloorStyle",
    "StyleTransformRequest",
    "InpaintRequest",
    "ExteriorRequest",
    "RepaintRequest",
    "RefloorRequest",
    "StyleTransferRequest",
    "FreeformRequest",
    "GenerationRequest",
    "parse_generation_request",
    # Prompt tables
    "STYLE_PROMPTS",
    "ROOM_PROMPTS",
    "HOUSE_TYPE_PROMPTS",
    "slugify",
    # Prompt builder
    "build_prompt",
    "build_style_transform_prompt",
    "build_inpaint_prompt",
    "build_exterior_prompt",
    "build_repaint_prompt",
    "build_refloor_prompt",
    "build_style_transfer_prompt",
    "build_freeform_prompt",
    # Progress
    "ProgressCurve",
    "ProgressEstimator",
    "PRIMARY_CURVE",
    "EDIT_CURVE",
    # Client
    "ErrorKind",
    "GenerationError",
    "VARIANTS",
    "TaskVariant",
    "build_task",
    "RunwareClient",
    "GenerationResult",
]
