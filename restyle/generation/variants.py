"""
Per-kind task configuration for the Runware image inference API.

Each operation kind differs only in model, output size, progress curve,
prompt builder and the extra payload fields it sends. The shared
retry/dispatch logic lives in the client.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .progress import EDIT_CURVE, PRIMARY_CURVE, ProgressCurve
from .prompt_builder import (
    build_exterior_prompt,
    build_freeform_prompt,
    build_inpaint_prompt,
    build_refloor_prompt,
    build_repaint_prompt,
    build_style_transfer_prompt,
    build_style_transform_prompt,
)
from .prompt_templates import NEGATIVE_PROMPT

FLUX_DEV_MODEL = "runware:101@1"
FLUX_FILL_MODEL = "runware:102@1"
FLUX_KONTEXT_MODEL = "bfl:3@1"

OUTPUT_FORMAT = "JPEG"

# Primary restyle path
STYLE_STRENGTH = 0.75
STYLE_CFG_SCALE = 3.5
STYLE_STEPS = 28


@dataclass(frozen=True)
class TaskVariant:
    """Wire configuration for one operation kind."""
    kind: str
    model: str
    width: int
    height: int
    curve: ProgressCurve
    build_prompt: Callable[[Any], str]
    build_payload: Callable[[Any], Dict[str, Any]]


def _style_transform_payload(request) -> Dict[str, Any]:
    return {
        "seedImage": request.source_image,
        "strength": STYLE_STRENGTH,
        "CFGScale": STYLE_CFG_SCALE,
        "steps": STYLE_STEPS,
        "negativePrompt": NEGATIVE_PROMPT,
    }


def _inpaint_payload(request) -> Dict[str, Any]:
    return {
        "seedImage": request.source_image,
        "maskImage": request.mask_image,
        "negativePrompt": NEGATIVE_PROMPT,
    }


def _exterior_payload(request) -> Dict[str, Any]:
    return {
        "seedImage": request.source_image,
        "negativePrompt": NEGATIVE_PROMPT,
    }


def _reference_edit_payload(request) -> Dict[str, Any]:
    return {"referenceImages": [request.source_image]}


def _style_transfer_payload(request) -> Dict[str, Any]:
    # Source first: the edit is applied to it, the second image only guides the look
    return {"referenceImages": [request.source_image, request.style_reference_image]}


VARIANTS: Dict[str, TaskVariant] = {
    "style-transform": TaskVariant(
        kind="style-transform",
        model=FLUX_DEV_MODEL,
        width=1280,
        height=832,
        curve=PRIMARY_CURVE,
        build_prompt=build_style_transform_prompt,
        build_payload=_style_transform_payload,
    ),
    "inpaint": TaskVariant(
        kind="inpaint",
        model=FLUX_FILL_MODEL,
        width=1280,
        height=832,
        curve=PRIMARY_CURVE,
        build_prompt=build_inpaint_prompt,
        build_payload=_inpaint_payload,
    ),
    "exterior": TaskVariant(
        kind="exterior",
        model=FLUX_DEV_MODEL,
        width=1280,
        height=832,
        curve=PRIMARY_CURVE,
        build_prompt=build_exterior_prompt,
        build_payload=_exterior_payload,
    ),
    "repaint": TaskVariant(
        kind="repaint",
        model=FLUX_KONTEXT_MODEL,
        width=1248,
        height=832,
        curve=EDIT_CURVE,
        build_prompt=build_repaint_prompt,
        build_payload=_reference_edit_payload,
    ),
    "refloor": TaskVariant(
        kind="refloor",
        model=FLUX_KONTEXT_MODEL,
        width=1248,
        height=832,
        curve=EDIT_CURVE,
        build_prompt=build_refloor_prompt,
        build_payload=_reference_edit_payload,
    ),
    "style-transfer": TaskVariant(
        kind="style-transfer",
        model=FLUX_KONTEXT_MODEL,
        width=1248,
        height=832,
        curve=EDIT_CURVE,
        build_prompt=build_style_transfer_prompt,
        build_payload=_style_transfer_payload,
    ),
    "freeform": TaskVariant(
        kind="freeform",
        model=FLUX_KONTEXT_MODEL,
        width=1248,
        height=832,
        curve=EDIT_CURVE,
        build_prompt=build_freeform_prompt,
        build_payload=_reference_edit_payload,
    ),
}


def get_variant(kind: str) -> TaskVariant:
    return VARIANTS[kind]


def build_task(request, task_uuid: str, prompt: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the imageInference task object for one attempt.

    Args:
        request: Any generation request model
        task_uuid: Fresh v4 UUID for this attempt
        prompt: Pre-rendered prompt (rendered from the request if omitted)

    Returns:
        Task dict; the API expects it wrapped in a single-element list
    """
    variant = get_variant(request.kind)
    if prompt is None:
        prompt = variant.build_prompt(request)

    task: Dict[str, Any] = {
        "taskType": "imageInference",
        "taskUUID": task_uuid,
        "positivePrompt": prompt,
        "width": variant.width,
        "height": variant.height,
        "model": variant.model,
        "numberResults": 1,
        "outputFormat": OUTPUT_FORMAT,
    }
    task.update(variant.build_payload(request))
    return task
