"""
Static prompt fragments for room, garden and exterior redesigns.

Style, room and house-type descriptions are keyed by slug (lowercase,
hyphen-separated). Garden and exterior styles live in the same style table
under ``garden-`` and ``exterior-`` prefixed slugs so that a scene never
picks up a description written for a different kind of space.
"""

import re
from typing import Dict

FRAGMENT_SEPARATOR = ", "

GARDEN_PREFIX = "garden-"
EXTERIOR_PREFIX = "exterior-"


STYLE_PROMPTS: Dict[str, str] = {
    # Interior styles
    "modern": (
        "clean lines, minimalist furniture, neutral color palette with white, grey, "
        "and black, sleek surfaces, glossy finishes, geometric shapes, "
        "open floor plan, minimal ornamentation, functional design, "
        "contemporary lighting, polished metal accents, glass elements, "
        "uncluttered space, geometric patterns, "
        "emphasis on horizontal and vertical lines"
    ),
    "bohemian": (
        "eclectic mix of patterns and textures, layered textiles, vintage rugs, "
        "macrame wall hangings, plants and greenery, "
        "warm earthy tones with pops of vibrant colors, "
        "natural materials like rattan and wicker, floor cushions, tapestries, "
        "ethnic prints, global-inspired decor, artistic wall art, "
        "cozy and lived-in feel, mixed furniture styles, colorful throw pillows, "
        "hanging plants, natural wood tones"
    ),
    "dark-academia": (
        "rich dark wood furniture, leather armchairs, "
        "vintage bookshelves filled with books, antique brass lamps, "
        "deep jewel tones like burgundy, forest green, and navy, classical artwork, "
        "oil paintings in ornate frames, globe and vintage maps, Persian rugs, "
        "velvet upholstery, wood paneling, scholarly atmosphere, dim warm lighting, "
        "gothic architectural elements, vintage study aesthetic, "
        "intellectual ambiance, traditional crown molding, heavy curtains"
    ),
    "dark-bohemian": (
        "moody color palette with deep purples, blacks, and dark greens, "
        "velvet and rich textured fabrics, dramatic wall art, mystical decor elements, "
        "eclectic vintage furniture, dark patterned rugs, gothic-inspired accessories, "
        "candlelight and warm ambient lighting, macrame in dark tones, dried flowers, "
        "antique mirrors, layered textiles in deep hues, "
        "natural elements with dark wood, mysterious and enchanting atmosphere"
    ),
    "scandinavian": (
        "light wood floors, white walls, minimal furniture with clean lines, "
        "hygge atmosphere, natural light emphasis, "
        "pale color palette with whites and light grays, "
        "functional Scandinavian furniture, cozy textiles like wool throws, "
        "simple pendant lighting, plants as accents, decluttered space, "
        "natural materials, blonde wood tones, geometric patterns in soft colors, "
        "airy and bright feel, emphasis on functionality and simplicity, "
        "muted pastel accents"
    ),
    "industrial": (
        "exposed brick walls, concrete floors, metal fixtures and pipes, "
        "edison bulb lighting, weathered wood elements, open ductwork, steel beams, "
        "factory-style windows, utilitarian furniture, leather seating, metal stools, "
        "neutral color palette with grays and browns, unfinished surfaces, "
        "repurposed industrial items, minimalist decor, raw materials, "
        "warehouse aesthetic, metal shelving units, distressed finishes"
    ),
    "traditional": (
        "classic furniture with ornate details, rich wood tones, "
        "elegant upholstered pieces, damask and floral patterns, crystal chandeliers, "
        "crown molding and wainscoting, formal arrangement, symmetrical layouts, "
        "antique accessories, oriental rugs, warm color palette, "
        "traditional artwork in gold frames, table lamps with fabric shades, "
        "luxurious draperies, timeless elegance, carved wood details, "
        "balanced and cohesive design"
    ),
    "minimalist": (
        "stark white walls, extremely minimal furniture, no clutter, "
        "monochromatic color scheme, essential items only, clean surfaces, "
        "hidden storage solutions, simple geometric forms, negative space emphasis, "
        "functional pieces with no ornamentation, bare windows or simple blinds, "
        "quality over quantity, zen-like atmosphere, natural light, subtle textures, "
        "neutral tones, sleek and unadorned aesthetic"
    ),
    "rustic": (
        "reclaimed wood furniture, natural stone elements, exposed wooden beams, "
        "cozy fireplace, warm earth tones, vintage farmhouse pieces, "
        "natural fiber textiles like burlap and linen, wrought iron accents, "
        "distressed finishes, handcrafted items, organic shapes, "
        "warm ambient lighting, nature-inspired decor, wooden floors, "
        "comfortable overstuffed seating, natural materials throughout, "
        "casual and inviting atmosphere"
    ),
    "contemporary": (
        "current design trends, mix of modern and traditional elements, "
        "curved furniture lines, bold accent colors, artistic lighting fixtures, "
        "variety of textures, geometric patterns, neutral base with color pops, "
        "innovative materials, sculptural elements, asymmetrical balance, "
        "open concept layout, statement pieces, glass and metal accents, "
        "sophisticated and current aesthetic, attention to architecture"
    ),
    "tropical": (
        "natural woven furniture like rattan and bamboo, lush indoor plants, "
        "palm leaf prints, bright tropical colors like turquoise and coral, "
        "light and airy fabrics, bamboo blinds, wicker accents, "
        "tropical leaf wallpaper or art, natural light, beach-inspired decor, "
        "coastal elements, white and natural wood tones, relaxed atmosphere, "
        "outdoor-indoor connection, botanical prints, casual seating"
    ),
    "art-deco": (
        "geometric patterns and bold symmetry, "
        "luxurious materials like marble and brass, "
        "rich jewel tones like emerald and sapphire, "
        "metallic accents in gold and chrome, glamorous mirrors with geometric frames, "
        "velvet upholstery, stepped forms and ziggurat shapes, sunburst motifs, "
        "lacquered furniture, high contrast color schemes, sophisticated and elegant, "
        "angular furniture, decorative screens, stylized floral patterns, "
        "opulent and dramatic aesthetic"
    ),
    "modern-farmhouse": (
        "shiplap walls, barn doors, rustic wood beams mixed with modern furniture, "
        "white or neutral color palette, industrial metal fixtures, farmhouse sink, "
        "open shelving, vintage-inspired lighting, clean lines with rustic textures, "
        "comfortable upholstered furniture, natural materials, wooden accents, "
        "simple window treatments, fresh and updated country style, "
        "mix of old and new, cozy yet refined atmosphere"
    ),
    "coastal": (
        "light blue and white color scheme, natural textures like jute and rope, "
        "driftwood accents, nautical decor elements, striped patterns, "
        "weathered wood furniture, sea-inspired artwork, "
        "large windows with sheer curtains, bright and airy feel, "
        "coral and seashell decorations, light linens, wicker furniture, "
        "relaxed beach house vibe, soft sandy neutrals, ocean-inspired palette"
    ),
    "japandi": (
        "Japanese minimalism meets Scandinavian functionality, "
        "natural wood in light and medium tones, clean lines, "
        "neutral color palette with warm undertones, wabi-sabi aesthetic, "
        "low-profile furniture, rice paper screens or shoji-inspired elements, "
        "minimal ornamentation, natural materials, zen atmosphere, "
        "quality craftsmanship, subtle textures, perfect balance, clutter-free space, "
        "organic shapes, handmade ceramics, harmonious and peaceful design"
    ),
    "french-country": (
        "distressed furniture with antique finish, soft pastel colors, toile patterns, "
        "floral prints, wrought iron accents, rustic wooden beams, farmhouse table, "
        "upholstered chairs, vintage accessories, copper cookware, "
        "open shelving with displayed dishware, romantic and charming aesthetic, "
        "natural stone elements, linen fabrics, chandeliers, country elegance, "
        "warm and inviting"
    ),
    "shabby-chic": (
        "distressed white furniture, vintage pieces with worn finishes, "
        "soft pastel colors like blush pink and mint, romantic floral patterns, "
        "ruffled fabrics, vintage mirrors and frames, crystal chandeliers, "
        "feminine and delicate aesthetic, lace accents, repurposed vintage items, "
        "chippy paint finishes, comfortable overstuffed seating, "
        "roses and botanical prints, cottage-style charm, soft and dreamy atmosphere"
    ),
    "transitional": (
        "blend of traditional and contemporary styles, "
        "neutral color palette with strategic color accents, "
        "mix of curved and straight lines, classic furniture with modern updates, "
        "timeless elegance, minimal accessories, comfortable and sophisticated, "
        "quality fabrics, balanced proportions, subtle patterns, "
        "refined yet relaxed atmosphere, versatile design elements, "
        "understated luxury, clean upholstery with traditional shapes"
    ),

    # Garden styles
    "garden-zen": (
        "raked gravel, moss-covered stones, Japanese maples, bamboo accents, "
        "stone lanterns, minimalist planting, calm water feature, balanced asymmetry"
    ),
    "garden-cottage": (
        "informal overflowing flower borders, roses and foxgloves, climbing plants on trellises, "
        "winding gravel paths, picket fence details, abundant mixed perennials"
    ),
    "garden-mediterranean": (
        "terracotta pots, olive trees, lavender and rosemary, gravel terraces, "
        "sun-bleached stone walls, drought-tolerant planting, warm earthy tones"
    ),
    "garden-tropical": (
        "lush layered foliage, palms and banana plants, bold large leaves, "
        "vibrant flowering plants, natural stone paving, dense green canopy"
    ),
    "garden-english": (
        "manicured lawn, deep herbaceous borders, clipped boxwood hedges, "
        "brick paths, rose arbors, classic symmetrical layout"
    ),
    "garden-desert": (
        "xeriscaping, cacti and agaves, ornamental grasses, decomposed granite paths, "
        "boulders and natural stone, sandy earth tones"
    ),

    # Exterior styles
    "exterior-modern": (
        "flat or low-pitched roofline, large glass panels, smooth stucco and metal cladding, "
        "clean horizontal lines, minimal trim, monochrome facade"
    ),
    "exterior-farmhouse": (
        "white board and batten siding, black window frames, gabled metal roof, "
        "covered front porch with wood posts, warm lantern lighting"
    ),
    "exterior-colonial": (
        "symmetrical facade, centered front door with pediment, evenly spaced shuttered windows, "
        "brick or clapboard siding, side-gabled roof"
    ),
    "exterior-mediterranean": (
        "stucco walls, red clay tile roof, arched windows and doorways, "
        "wrought iron details, warm earth-toned facade"
    ),
    "exterior-craftsman": (
        "low-pitched gabled roof, exposed rafter tails, tapered porch columns on stone bases, "
        "natural wood and stone materials, earthy color palette"
    ),
}


ROOM_PROMPTS: Dict[str, str] = {
    "living-room": (
        "must include seating area with sofa or chairs, coffee table, "
        "entertainment area, ambient lighting, "
        "comfortable arrangement for conversation and relaxation"
    ),
    "bedroom": (
        "must include bed as central focal point, nightstands or bedside tables, "
        "adequate lighting, dresser or storage, calming atmosphere, "
        "comfortable sleeping space"
    ),
    "kitchen": (
        "must include countertops, cabinets, cooking appliances (stove/oven), sink, "
        "refrigerator, food preparation areas, functional work triangle layout"
    ),
    "bathroom": (
        "must include shower or bathtub, toilet, sink/vanity, mirror, towel storage, "
        "proper lighting, clean and hygienic appearance"
    ),
    "dining-room": (
        "must include dining table with chairs, proper seating capacity, "
        "lighting fixture above table, space for serving, comfortable eating area"
    ),
    "home-office": (
        "must include desk with workspace, office chair, adequate task lighting, "
        "storage for supplies, organized work environment, professional atmosphere"
    ),
    "nursery": (
        "must include crib or baby bed, changing table or area, soft lighting, "
        "storage for baby items, safe and calming environment, child-appropriate decor"
    ),
    "kids-room": (
        "must include bed suitable for children, toy storage, play area, "
        "safe furniture, age-appropriate design"
    ),
    "laundry-room": (
        "must include washing machine, dryer or drying space, folding area, "
        "storage for detergents, utility sink, organized and functional layout"
    ),
    "walk-in-closet": (
        "must include hanging rods for clothes, shelving units, drawer systems, "
        "full-length mirror, good lighting, organized storage solutions"
    ),
    "entryway": (
        "must include area for shoes, coat hooks or storage, welcoming atmosphere, "
        "proper lighting, functional drop zone for keys and mail"
    ),
    "home-gym": (
        "must include exercise equipment, workout space, mirrors, proper flooring, "
        "adequate lighting, motivating atmosphere, storage for gear"
    ),
    "library": (
        "must include bookshelves with books, reading chair or seating, "
        "good reading light, quiet atmosphere, intellectual aesthetic"
    ),
    "media-room": (
        "must include large screen or TV, comfortable seating arranged for viewing, "
        "sound system, dark ambient lighting, entertainment setup"
    ),
    "basement": (
        "must include functional space layout, proper lighting, storage solutions, "
        "finished walls and floors, multi-purpose areas"
    ),
    "attic": (
        "must include sloped ceiling or roof line, dormer windows if present, "
        "creative use of angular space, cozy atmosphere, proper lighting"
    ),
    "sunroom": (
        "must include large windows, abundant natural light, plants or greenery, "
        "comfortable seating, connection to outdoors, bright airy atmosphere"
    ),
    "balcony": (
        "must include outdoor furniture, railing visible, "
        "connection to interior space, plants or decor, outdoor living atmosphere"
    ),
    "patio": (
        "must include outdoor furniture, ground surface (pavers/concrete/wood), "
        "connection to landscape, outdoor living setup, entertaining space"
    ),
    "garage": (
        "must include vehicle parking space, storage solutions, workbench area, "
        "tool organization, functional utility space"
    ),
}


HOUSE_TYPE_PROMPTS: Dict[str, str] = {
    "house": (
        "single-family home exterior, "
        "residential house facade with distinct architectural style, "
        "front entrance with door and surrounding details, "
        "windows arranged for facade symmetry, roofing visible (pitched roof, gables, "
        "dormers, or flat roof depending on style), "
        "landscaping around the foundation including garden beds, walkways, "
        "or driveways, architectural features like columns, porches, verandas, "
        "or architectural trim, building materials appropriate to style (siding, "
        "brick, stone, stucco, wood), garage or carport if visible in front facade, "
        "architectural details that define the style, "
        "professional exterior photography showing front elevation with proper scale and depth"
    ),
    "apartment": (
        "multi-unit residential building exterior, apartment complex facade, "
        "multiple windows arranged in vertical columns, balconies or terraces, "
        "entrance areas with doorways, "
        "architectural details like cornices or decorative elements, "
        "modern or traditional building materials (brick, concrete, stucco, or glass), "
        "coordinated window treatments and frames, building signage or numbering, "
        "landscaped entry areas, parking or access areas visible, "
        "professional architectural photography perspective showing building facade"
    ),
    "villa": (
        "luxury villa exterior, "
        "large detached residential home with sophisticated architectural design, "
        "grand entrance with prominent door and surrounding architectural details, "
        "expansive facade with well-proportioned windows and architectural elements, "
        "high-quality building materials including stone, stucco, or premium siding, "
        "formal landscaping with mature gardens and pathways, "
        "architectural features like columns, porticos, terraces, or balconies, "
        "multi-level design with varied rooflines and gables, "
        "luxurious and prestigious appearance, "
        "well-maintained exterior with elegant details, "
        "professional architectural photography showing grandeur and scale"
    ),
    "townhouse": (
        "townhouse exterior, multi-story attached residential building, "
        "narrow but tall facade with multiple floors visible, "
        "vertical arrangement of windows creating sense of height, "
        "staircase or entry area leading to main entrance, "
        "consistent facade design shared with neighboring units, "
        "architectural details appropriate to style and era, "
        "building materials like brick, stone, or siding, "
        "small front garden or landscaping area, "
        "urban residential architectural character, "
        "professional exterior photography showing complete facade elevation"
    ),
    "cottage": (
        "charming cottage exterior, small rural or country home with cozy character, "
        "picturesque and inviting facade with rustic architectural details, "
        "steep pitched roof with gables or dormer windows, "
        "informal landscaping with cottage-style gardens, "
        "traditional building materials like wood, stone, or brick, "
        "small-scale architectural elements with decorative details, "
        "warm and welcoming appearance, natural and unpretentious aesthetic, "
        "country or countryside setting implied in design, "
        "professional architectural photography showing charming exterior character"
    ),
    "mansion": (
        "grand mansion exterior, large prestigious estate home, "
        "imposing facade with multiple architectural elements and wings, "
        "formal entrance with elaborate architectural details, "
        "extensive use of high-end materials like stone, marble, or premium brick, "
        "formal symmetrical facade design, classical architectural features, "
        "landscaped grounds with mature trees and formal gardens, "
        "architectural details like columns, cornices, pediments, or balustrades, "
        "luxurious and opulent appearance, "
        "historical or classical architectural influences, "
        "professional architectural photography showing the grandeur and stately presence"
    ),
    "office-building": (
        "commercial office building exterior, professional commercial architecture, "
        "large-scale building facade with multiple floors, "
        "extensive glazing and windows, "
        "modern or traditional commercial architectural elements, "
        "building entrance with prominent doors and surrounding architectural features, "
        "exterior materials like curtain walls, precast concrete, glass, metal panels, "
        "or stone, signage placement for business identification, "
        "lighting fixtures visible on exterior, surrounding context including parking, "
        "landscaping, plazas, or pedestrian areas, architectural details like louvers, "
        "sunshades, or decorative panels, "
        "professional commercial photography perspective showing building facade and context"
    ),
    "retail-building": (
        "commercial retail building exterior, shop or storefront facade, "
        "visible windows displaying merchandise or interior activity, "
        "entrance designed to attract customers with prominent doors, "
        "commercial signage and branding visible on exterior, "
        "storefront architectural style appropriate to business type, "
        "exterior materials suitable for commercial retail use, "
        "display windows with clear visibility into interior, "
        "street-level commercial architectural character, "
        "professional signage placement and building identification, "
        "professional exterior photography showing commercial retail facade and context"
    ),
}


# Framing and preservation fragments per operation kind
INTERIOR_FRAMING = (
    "keep the exact same room layout, walls, windows, doors, ceiling and camera angle",
    "preserve everything in the photo except the interior design style",
)
INTERIOR_PRESERVATION = (
    "do not change the room architecture or proportions",
    "do not move windows, doors or the camera perspective",
)

GARDEN_FRAMING = (
    "keep the exact same outdoor space, house walls, fences, terrain and camera angle",
    "preserve everything in the photo except the garden design and planting",
)
GARDEN_PRESERVATION = (
    "do not change the surrounding buildings or boundaries",
    "do not change the camera perspective",
)

EXTERIOR_FRAMING = (
    "keep the exact same building shape, rooflines, window and door placement and camera angle",
    "preserve everything in the photo except the exterior style and materials",
)
EXTERIOR_PRESERVATION = (
    "do not change the building footprint or number of floors",
    "do not change the surroundings or the camera perspective",
)

INPAINT_FRAMING = (
    "keep everything outside the masked area exactly the same",
    "preserve everything except the masked region",
)
INPAINT_PRESERVATION = (
    "seamlessly blended with the surrounding area",
    "do not change lighting, perspective or anything outside the mask",
)

EDIT_FRAMING = (
    "keep everything in this photo exactly the same",
)
EDIT_PRESERVATION_COMMON = (
    "do not change the room layout, architecture or camera angle",
)

INTERIOR_QUALITY = (
    "professional interior design photography, photorealistic, high detail, "
    "natural lighting, sharp focus"
)
GARDEN_QUALITY = (
    "professional landscape photography, photorealistic, high detail, "
    "natural daylight, sharp focus"
)
EXTERIOR_QUALITY = (
    "professional architectural photography, photorealistic, high detail, "
    "natural daylight, sharp focus"
)

NEGATIVE_PROMPT = "low quality, blurry, distorted, bad anatomy, poorly drawn"


def slugify(name: str) -> str:
    """Normalize a display name into a lookup key ('Living Room' -> 'living-room')."""
    return re.sub(r"\s+", "-", name.strip().lower())


def generic_style_fragment(name: str) -> str:
    return f"{name} aesthetic, {name} design elements"


def generic_garden_fragment(name: str) -> str:
    return f"{name} garden aesthetic, {name} inspired landscaping, diverse plants and flowers"


def generic_exterior_fragment(name: str) -> str:
    return f"{name} architectural style, {name} facade details and materials"


def get_style_prompt(style: str) -> str:
    """Interior style description, or a generic fragment built from the name."""
    return STYLE_PROMPTS.get(slugify(style)) or generic_style_fragment(style)


def get_scoped_style_prompt(style: str, prefix: str, fallback) -> str:
    """
    Look up a style under a scope prefix ('garden-', 'exterior-').

    Only the prefixed entry is ever used. An unprefixed entry describes an
    interior and would be wrong for this scene, so its presence still
    results in the generic fallback.
    """
    scoped = STYLE_PROMPTS.get(prefix + slugify(style))
    if scoped:
        return scoped
    return fallback(style)


def get_room_prompt(room: str) -> str:
    """Room requirements text, or '' when the room type is unknown."""
    return ROOM_PROMPTS.get(slugify(room), "")


def get_house_type_prompt(house_type: str) -> str:
    """House-type description text, or '' when the house type is unknown."""
    return HOUSE_TYPE_PROMPTS.get(slugify(house_type), "")


def has_style_prompt(style: str) -> bool:
    return slugify(style) in STYLE_PROMPTS


def has_room_prompt(room: str) -> bool:
    return slugify(room) in ROOM_PROMPTS


def has_house_type_prompt(house_type: str) -> bool:
    return slugify(house_type) in HOUSE_TYPE_PROMPTS
