"""
Tests for prompt construction
"""

import pytest

from restyle.generation.prompt_builder import (
    build_exterior_prompt,
    build_freeform_prompt,
    build_inpaint_prompt,
    build_prompt,
    build_refloor_prompt,
    build_repaint_prompt,
    build_style_transfer_prompt,
    build_style_transform_prompt,
    join_fragments,
    palette_fragments,
)
from restyle.generation.prompt_templates import (
    GARDEN_QUALITY,
    HOUSE_TYPE_PROMPTS,
    INTERIOR_FRAMING,
    INTERIOR_QUALITY,
    ROOM_PROMPTS,
    STYLE_PROMPTS,
    get_house_type_prompt,
    get_room_prompt,
    get_style_prompt,
    has_house_type_prompt,
    has_room_prompt,
    has_style_prompt,
    slugify,
)
from restyle.generation.schemas import (
    ColorPalette,
    ExteriorRequest,
    FloorStyle,
    FreeformRequest,
    InpaintRequest,
    RefloorRequest,
    RepaintRequest,
    StyleTransferRequest,
    StyleTransformRequest,
    TargetColor,
)

SOURCE = "file:///photos/room.jpg"


def all_requests():
    """One well-formed request per operation kind."""
    return [
        StyleTransformRequest(
            source_image=SOURCE,
            room="Living Room",
            style="Scandinavian",
            palette=ColorPalette(name="Nordic", colors=["white", "oak"]),
        ),
        InpaintRequest(
            source_image=SOURCE,
            mask_image="data:image/png;base64,AAAA",
            instruction="a green velvet armchair",
        ),
        ExteriorRequest(source_image=SOURCE, house_type="Cottage", style="Craftsman"),
        RepaintRequest(source_image=SOURCE, target_color=TargetColor(name="Sky", hex="#4a90e2")),
        RefloorRequest(
            source_image=SOURCE,
            floor_style=FloorStyle(name="Oak Herringbone", descriptive_prompt="light oak herringbone parquet"),
        ),
        StyleTransferRequest(source_image=SOURCE, style_reference_image="https://example.com/ref.jpg"),
        FreeformRequest(source_image=SOURCE, instruction="add a large fiddle leaf fig in the corner"),
    ]


class TestSlugLookups:
    def test_slugify(self):
        assert slugify("Living Room") == "living-room"
        assert slugify("  Dark   Academia ") == "dark-academia"

    def test_style_lookup_by_display_name(self):
        assert get_style_prompt("Dark Academia") == STYLE_PROMPTS["dark-academia"]
        assert has_style_prompt("Modern Farmhouse")

    def test_unknown_style_falls_back_to_generic(self):
        assert get_style_prompt("Cyber Baroque") == (
            "Cyber Baroque aesthetic, Cyber Baroque design elements"
        )

    def test_room_lookup(self):
        assert get_room_prompt("Home Office") == ROOM_PROMPTS["home-office"]
        assert has_room_prompt("walk in closet")

    def test_table_text_is_single_spaced(self):
        assert STYLE_PROMPTS["contemporary"].startswith(
            "current design trends, mix of modern and traditional elements, curved furniture lines"
        )
        assert "cooking appliances (stove/oven)" in ROOM_PROMPTS["kitchen"]
        for table in (STYLE_PROMPTS, ROOM_PROMPTS, HOUSE_TYPE_PROMPTS):
            for text in table.values():
                assert "  " not in text
                assert text == text.strip()

    def test_house_type_lookup(self):
        assert get_house_type_prompt("Villa") == HOUSE_TYPE_PROMPTS["villa"]
        assert has_house_type_prompt(" Apartment ")
        assert not has_house_type_prompt("Lighthouse")

    def test_unknown_lookups_return_empty(self):
        assert get_room_prompt("Wine Cellar") == ""
        assert get_house_type_prompt("Lighthouse") == ""


class TestDeterminism:
    @pytest.mark.parametrize("request_model", all_requests(), ids=lambda r: r.kind)
    def test_same_request_same_prompt(self, request_model):
        assert build_prompt(request_model) == build_prompt(request_model)

    @pytest.mark.parametrize("request_model", all_requests(), ids=lambda r: r.kind)
    def test_prompt_never_empty(self, request_model):
        assert build_prompt(request_model).strip()

    def test_equal_requests_built_separately(self):
        a = StyleTransformRequest(source_image=SOURCE, room="Bedroom", style="Japandi")
        b = StyleTransformRequest(source_image=SOURCE, room="Bedroom", style="Japandi")
        assert build_prompt(a) == build_prompt(b)


class TestStyleTransformPrompt:
    def test_fragment_order(self):
        request = StyleTransformRequest(source_image=SOURCE, room="Bedroom", style="Industrial")
        prompt = build_style_transform_prompt(request)

        assert prompt.startswith(INTERIOR_FRAMING[0])
        assert prompt.endswith(INTERIOR_QUALITY)

        change = prompt.index("redesign this Bedroom in Industrial style")
        detail = prompt.index(STYLE_PROMPTS["industrial"])
        room_detail = prompt.index(ROOM_PROMPTS["bedroom"])
        preserve = prompt.index("do not change the room architecture")
        assert change < detail < room_detail < preserve

    def test_unknown_style_contains_raw_name(self):
        request = StyleTransformRequest(source_image=SOURCE, room="Wine Cellar", style="Cyber Baroque")
        prompt = build_style_transform_prompt(request)
        assert "Cyber Baroque aesthetic, Cyber Baroque design elements" in prompt
        assert "Wine Cellar" in prompt

    def test_missing_room_defaults(self):
        request = StyleTransformRequest(source_image=SOURCE, style="Coastal")
        assert "redesign this room in Coastal style" in build_style_transform_prompt(request)

    def test_style_override_used_verbatim(self):
        override = "  pink neon, chrome everything  "
        request = StyleTransformRequest(
            source_image=SOURCE, style="Modern", style_prompt_override=override,
        )
        prompt = build_style_transform_prompt(request)
        assert "pink neon, chrome everything" in prompt
        assert STYLE_PROMPTS["modern"] not in prompt

    def test_palette_repeated_three_times(self):
        request = StyleTransformRequest(
            source_image=SOURCE,
            style="Modern",
            palette=ColorPalette(colors=["terracotta", "sage", "cream"]),
        )
        prompt = build_style_transform_prompt(request)
        assert prompt.count("terracotta and sage and cream") == 3

    def test_palette_sits_before_preservation(self):
        request = StyleTransformRequest(
            source_image=SOURCE, style="Modern", palette=ColorPalette(colors=["navy"]),
        )
        prompt = build_style_transform_prompt(request)
        assert prompt.index("dominant color palette of navy") < prompt.index("do not change")


class TestGardenMode:
    def test_interior_entry_not_used_in_garden(self):
        assert "modern" in STYLE_PROMPTS
        assert "garden-modern" not in STYLE_PROMPTS

        request = StyleTransformRequest(source_image=SOURCE, style="Modern", mode="garden")
        prompt = build_style_transform_prompt(request)

        assert "Modern garden aesthetic, Modern inspired landscaping, diverse plants and flowers" in prompt
        assert "glossy finishes" not in prompt
        assert STYLE_PROMPTS["modern"] not in prompt

    def test_garden_entry_preferred(self):
        request = StyleTransformRequest(source_image=SOURCE, style="Zen", mode="garden")
        prompt = build_style_transform_prompt(request)
        assert STYLE_PROMPTS["garden-zen"] in prompt
        assert prompt.endswith(GARDEN_QUALITY)

    def test_unknown_garden_style_falls_back(self):
        request = StyleTransformRequest(source_image=SOURCE, style="Moon Garden", mode="garden")
        prompt = build_style_transform_prompt(request)
        assert "Moon Garden garden aesthetic" in prompt

    def test_garden_skips_room_requirements(self):
        request = StyleTransformRequest(
            source_image=SOURCE, room="Patio", style="Mediterranean", mode="garden",
        )
        prompt = build_style_transform_prompt(request)
        assert ROOM_PROMPTS["patio"] not in prompt
        assert "redesign this Patio as a Mediterranean style garden" in prompt


class TestExteriorPrompt:
    def test_exterior_style_entry(self):
        request = ExteriorRequest(source_image=SOURCE, house_type="Villa", style="Mediterranean")
        prompt = build_exterior_prompt(request)
        assert STYLE_PROMPTS["exterior-mediterranean"] in prompt
        assert get_house_type_prompt("villa") in prompt

    def test_interior_only_style_not_used_for_facade(self):
        request = ExteriorRequest(source_image=SOURCE, style="Bohemian")
        prompt = build_exterior_prompt(request)
        assert STYLE_PROMPTS["bohemian"] not in prompt
        assert "Bohemian architectural style" in prompt
        assert "transform this building exterior" in prompt

    def test_unknown_house_type_contains_raw_name(self):
        request = ExteriorRequest(source_image=SOURCE, house_type="Lighthouse", style="Gothic Revival")
        prompt = build_exterior_prompt(request)
        assert "Lighthouse exterior" in prompt
        assert "Gothic Revival" in prompt


class TestEditPrompts:
    def test_repaint_describes_color(self):
        request = RepaintRequest(
            source_image=SOURCE,
            target_color=TargetColor(name="Sky", hex="#4a90e2"),
            subject="kitchen cabinets",
        )
        prompt = build_repaint_prompt(request)
        assert "repaint the kitchen cabinets in Sky (#4A90E2)" in prompt
        assert "solid bright blue or sky blue painted kitchen cabinets" in prompt
        assert prompt.index("preserve everything except") < prompt.index("repaint the")

    def test_repaint_with_bad_hex_uses_name(self):
        request = RepaintRequest(source_image=SOURCE, target_color=TargetColor(name="Sage", hex="sage"))
        prompt = build_repaint_prompt(request)
        assert "solid Sage painted walls" in prompt

    def test_refloor_includes_descriptive_prompt(self):
        request = RefloorRequest(
            source_image=SOURCE,
            floor_style=FloorStyle(name="Terrazzo", descriptive_prompt="speckled white terrazzo tiles"),
        )
        prompt = build_refloor_prompt(request)
        assert prompt.index("replace the floor with Terrazzo flooring") < prompt.index(
            "speckled white terrazzo tiles"
        )

    def test_freeform_instruction_verbatim(self):
        instruction = "swap the sofa for a Chesterfield; keep the rug!"
        prompt = build_freeform_prompt(FreeformRequest(source_image=SOURCE, instruction=instruction))
        assert instruction in prompt

    def test_inpaint_starts_with_mask_framing(self):
        request = InpaintRequest(source_image=SOURCE, mask_image="data:x", instruction="a marble island")
        prompt = build_inpaint_prompt(request)
        assert prompt.startswith("keep everything outside the masked area exactly the same")
        assert "a marble island" in prompt

    def test_style_transfer_mentions_reference(self):
        request = StyleTransferRequest(source_image=SOURCE, style_reference_image="https://x/ref.jpg")
        prompt = build_style_transfer_prompt(request)
        assert "reference image" in prompt
        assert "https://x/ref.jpg" not in prompt


class TestHelpers:
    def test_join_skips_empty(self):
        assert join_fragments(["a", "", None, "  ", " b "]) == "a, b"

    def test_no_palette_no_fragments(self):
        assert palette_fragments(None) == []

    def test_dispatch_matches_specific_builder(self):
        request = FreeformRequest(source_image=SOURCE, instruction="brighter")
        assert build_prompt(request) == build_freeform_prompt(request)
