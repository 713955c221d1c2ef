"""
Pydantic models for generation requests.

One model per operation kind, discriminated by the ``kind`` field. Image
fields are opaque references (file URIs, https URLs or data URIs) that are
forwarded to the API untouched.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

ImageRef = Annotated[str, Field(min_length=1)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class _RequestModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ColorPalette(_RequestModel):
    """A named set of colors picked in the palette step."""
    name: Optional[str] = None
    colors: List[NonEmptyStr] = Field(..., min_length=1)


class TargetColor(_RequestModel):
    """Single paint color for repaint requests."""
    name: NonEmptyStr
    hex: NonEmptyStr


class FloorStyle(_RequestModel):
    """Flooring option with its descriptive prompt text."""
    name: NonEmptyStr
    descriptive_prompt: NonEmptyStr


class StyleTransformRequest(_RequestModel):
    """Restyle a room (or garden) photo into a design style."""
    kind: Literal["style-transform"] = "style-transform"
    source_image: ImageRef
    style: NonEmptyStr
    room: Optional[str] = None
    style_prompt_override: Optional[str] = None
    palette: Optional[ColorPalette] = None
    mode: Literal["interior", "garden"] = "interior"


class InpaintRequest(_RequestModel):
    """Replace the masked region of a photo (white = edit, black = keep)."""
    kind: Literal["inpaint"] = "inpaint"
    source_image: ImageRef
    mask_image: ImageRef
    instruction: NonEmptyStr


class ExteriorRequest(_RequestModel):
    """Restyle a building exterior."""
    kind: Literal["exterior"] = "exterior"
    source_image: ImageRef
    style: NonEmptyStr
    house_type: Optional[str] = None
    style_prompt_override: Optional[str] = None


class RepaintRequest(_RequestModel):
    """Change the paint color of one subject (walls, cabinets, ...)."""
    kind: Literal["repaint"] = "repaint"
    source_image: ImageRef
    target_color: TargetColor
    subject: NonEmptyStr = "walls"


class RefloorRequest(_RequestModel):
    """Swap the floor for a different material."""
    kind: Literal["refloor"] = "refloor"
    source_image: ImageRef
    floor_style: FloorStyle


class StyleTransferRequest(_RequestModel):
    """Apply the look of a reference photo to the source photo."""
    kind: Literal["style-transfer"] = "style-transfer"
    source_image: ImageRef
    style_reference_image: ImageRef


class FreeformRequest(_RequestModel):
    """Apply a free-text edit instruction."""
    kind: Literal["freeform"] = "freeform"
    source_image: ImageRef
    instruction: NonEmptyStr


GenerationRequest = Annotated[
    Union[
        StyleTransformRequest,
        InpaintRequest,
        ExteriorRequest,
        RepaintRequest,
        RefloorRequest,
        StyleTransferRequest,
        FreeformRequest,
    ],
    Field(discriminator="kind"),
]

_request_adapter = TypeAdapter(GenerationRequest)


def parse_generation_request(data: Dict[str, Any]) -> GenerationRequest:
    """
    Validate a plain dict into the matching request model.

    Raises:
        pydantic.ValidationError: unknown kind or missing/empty required fields
    """
    return _request_adapter.validate_python(data)
