"""
Prompt builder for photo redesign requests.

Every prompt follows the same fragment order: framing that pins down what
must stay the same, the one attribute to change, descriptive detail from
the lookup tables, explicit "do not change" fragments, and a closing
quality descriptor. The image model preserves unmentioned regions far
better when the prompt leads with the framing.
"""

from typing import Callable, Dict, Iterable, List, Optional

from ..utils.color_palette import describe_hex_color, normalize_hex
from .prompt_templates import (
    EDIT_FRAMING,
    EDIT_PRESERVATION_COMMON,
    EXTERIOR_FRAMING,
    EXTERIOR_PREFIX,
    EXTERIOR_PRESERVATION,
    EXTERIOR_QUALITY,
    FRAGMENT_SEPARATOR,
    GARDEN_FRAMING,
    GARDEN_PREFIX,
    GARDEN_PRESERVATION,
    GARDEN_QUALITY,
    INPAINT_FRAMING,
    INPAINT_PRESERVATION,
    INTERIOR_FRAMING,
    INTERIOR_PRESERVATION,
    INTERIOR_QUALITY,
    generic_exterior_fragment,
    generic_garden_fragment,
    get_house_type_prompt,
    get_room_prompt,
    get_scoped_style_prompt,
    get_style_prompt,
)
from .schemas import (
    ColorPalette,
    ExteriorRequest,
    FreeformRequest,
    GenerationRequest,
    InpaintRequest,
    RefloorRequest,
    RepaintRequest,
    StyleTransferRequest,
    StyleTransformRequest,
)


def join_fragments(fragments: Iterable[Optional[str]]) -> str:
    """Join non-empty fragments with the standard separator."""
    return FRAGMENT_SEPARATOR.join(f.strip() for f in fragments if f and f.strip())


def _override_or(override: Optional[str], default: Callable[[], str]) -> str:
    if override and override.strip():
        return override
    return default()


def palette_fragments(palette: Optional[ColorPalette]) -> List[str]:
    """
    Color fragments for a palette.

    The same color phrase is stated three times (scheme, surfaces, dominant
    palette); the model under-weights color when it is mentioned once.
    """
    if palette is None:
        return []
    colors = " and ".join(palette.colors)
    return [
        f"{colors} color scheme",
        f"walls, furniture and decor in {colors} tones",
        f"dominant color palette of {colors}",
    ]


def build_style_transform_prompt(request: StyleTransformRequest) -> str:
    """
    Build the prompt for a room or garden restyle.

    In garden mode the style detail only comes from a ``garden-`` entry;
    otherwise the generic garden fragment is used.
    """
    room = (request.room or "").strip()
    style = request.style

    if request.mode == "garden":
        label = room or "garden"
        detail = _override_or(
            request.style_prompt_override,
            lambda: get_scoped_style_prompt(style, GARDEN_PREFIX, generic_garden_fragment),
        )
        return join_fragments([
            *GARDEN_FRAMING,
            f"redesign this {label} as a {style} style garden",
            detail,
            *palette_fragments(request.palette),
            *GARDEN_PRESERVATION,
            GARDEN_QUALITY,
        ])

    label = room or "room"
    detail = _override_or(request.style_prompt_override, lambda: get_style_prompt(style))
    return join_fragments([
        *INTERIOR_FRAMING,
        f"redesign this {label} in {style} style",
        detail,
        get_room_prompt(room) if room else "",
        *palette_fragments(request.palette),
        *INTERIOR_PRESERVATION,
        INTERIOR_QUALITY,
    ])


def build_inpaint_prompt(request: InpaintRequest) -> str:
    return join_fragments([
        *INPAINT_FRAMING,
        request.instruction,
        "matching the lighting, perspective and materials of the surrounding scene",
        *INPAINT_PRESERVATION,
        INTERIOR_QUALITY,
    ])


def build_exterior_prompt(request: ExteriorRequest) -> str:
    """Build the prompt for a building exterior restyle."""
    house_type = (request.house_type or "").strip()
    style = request.style

    detail = _override_or(
        request.style_prompt_override,
        lambda: get_scoped_style_prompt(style, EXTERIOR_PREFIX, generic_exterior_fragment),
    )
    house_detail = ""
    if house_type:
        house_detail = get_house_type_prompt(house_type) or f"{house_type} exterior"

    return join_fragments([
        *EXTERIOR_FRAMING,
        f"transform this {house_type or 'building'} exterior into {style} architectural style",
        detail,
        house_detail,
        *EXTERIOR_PRESERVATION,
        EXTERIOR_QUALITY,
    ])


def build_repaint_prompt(request: RepaintRequest) -> str:
    """Build the prompt for repainting a single subject."""
    color = request.target_color
    subject = request.subject
    hex_code = normalize_hex(color.hex) or color.hex
    description = describe_hex_color(color.hex, color.name)

    return join_fragments([
        *EDIT_FRAMING,
        f"preserve everything except the color of the {subject}",
        f"repaint the {subject} in {color.name} ({hex_code})",
        f"solid {description} painted {subject}",
        "realistic paint texture with natural shading",
        f"do not change furniture, decor, flooring or any surface other than the {subject}",
        *EDIT_PRESERVATION_COMMON,
        INTERIOR_QUALITY,
    ])


def build_refloor_prompt(request: RefloorRequest) -> str:
    floor = request.floor_style
    return join_fragments([
        *EDIT_FRAMING,
        "preserve everything except the floor",
        f"replace the floor with {floor.name} flooring",
        floor.descriptive_prompt,
        "realistic floor texture following the room perspective",
        "do not change walls, furniture, decor or lighting",
        *EDIT_PRESERVATION_COMMON,
        INTERIOR_QUALITY,
    ])


def build_style_transfer_prompt(request: StyleTransferRequest) -> str:
    return join_fragments([
        *EDIT_FRAMING,
        "preserve everything except the decor style",
        "restyle this space to match the style, colors and materials of the reference image",
        "apply the reference image's furniture style and color palette",
        "do not copy the layout of the reference image",
        *EDIT_PRESERVATION_COMMON,
        INTERIOR_QUALITY,
    ])


def build_freeform_prompt(request: FreeformRequest) -> str:
    # The instruction is used verbatim
    return join_fragments([
        *EDIT_FRAMING,
        "preserve everything except what the following instruction asks to change",
        request.instruction,
        "do not change anything the instruction does not mention",
        *EDIT_PRESERVATION_COMMON,
        INTERIOR_QUALITY,
    ])


PROMPT_BUILDERS: Dict[str, Callable[..., str]] = {
    "style-transform": build_style_transform_prompt,
    "inpaint": build_inpaint_prompt,
    "exterior": build_exterior_prompt,
    "repaint": build_repaint_prompt,
    "refloor": build_refloor_prompt,
    "style-transfer": build_style_transfer_prompt,
    "freeform": build_freeform_prompt,
}


def build_prompt(request: GenerationRequest) -> str:
    """Build the prompt for any request kind."""
    return PROMPT_BUILDERS[request.kind](request)
