# fragments/vocabularies.py

"""
Fixed vocabularies for randomized presets.

A vocabulary is an ordered tuple of fragments. A fragment is either a
plain string or a bundle (a mapping of field -> string) when several
placeholders must stay coherent, e.g. a butterfly color scheme or a
paper-pop theme where hair, makeup and lighting belong together.

Vocabulary names are the keys of the rotation registry, so each one
rotates independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple, Union

Fragment = Union[str, Mapping[str, str]]


@dataclass(frozen=True)
class Vocabulary:
    name: str
    fragments: Tuple[Fragment, ...]

    def __post_init__(self) -> None:
        if not self.fragments:
            raise ValueError(f"Vocabulary {self.name!r} is empty")

    def __len__(self) -> int:
        return len(self.fragments)


# ---------------------------------------------------------------------------
# Single-axis color vocabularies
# ---------------------------------------------------------------------------

SMOKE_COLORS = Vocabulary(
    "smoke_color",
    (
        "deep crimson",
        "electric violet",
        "emerald green",
        "midnight blue",
        "molten gold",
        "rose pink",
        "pure white",
        "jet black",
    ),
)

CRYSTAL_COLORS = Vocabulary(
    "crystal_color",
    (
        "icy aquamarine",
        "amethyst purple",
        "rose quartz pink",
        "smoky topaz",
        "clear diamond white",
        "sapphire blue",
    ),
)

BUTTERFLY_COLORS = Vocabulary(
    "butterfly_color",
    (
        {
            "primary_color": "electric blue",
            "secondary_color": "vivid blue",
            "background_gradient": "soft indigo gradient",
        },
        {
            "primary_color": "deep violet",
            "secondary_color": "royal purple",
            "background_gradient": "soft lavender gradient",
        },
        {
            "primary_color": "emerald green",
            "secondary_color": "jade green",
            "background_gradient": "soft forest gradient",
        },
        {
            "primary_color": "sunset orange",
            "secondary_color": "warm amber",
            "background_gradient": "soft peach gradient",
        },
        {
            "primary_color": "rose pink",
            "secondary_color": "coral pink",
            "background_gradient": "soft blush gradient",
        },
        {
            "primary_color": "pure white",
            "secondary_color": "pearl white",
            "background_gradient": "soft silver gradient",
        },
        {
            "primary_color": "midnight black",
            "secondary_color": "obsidian black",
            "background_gradient": "soft charcoal gradient",
        },
    ),
)

# ---------------------------------------------------------------------------
# Animal companions
# ---------------------------------------------------------------------------

# No entry may be a substring of another.
REFLECTION_PACT_ANIMALS = Vocabulary(
    "reflection_pact_animal",
    (
        "black panther",
        "white wolf",
        "snow leopard",
        "golden eagle",
        "red fox",
        "barn owl",
        "raven",
        "silver stag",
        "lynx",
        "tiger",
        "peacock",
        "falcon",
        "jaguar",
        "swan",
        "cobra",
        "heron",
        "arctic hare",
        "lioness",
        "koi fish",
    ),
)

MOLTEN_GLOSS_ANIMALS = Vocabulary(
    "molten_gloss_animal",
    (
        "panther",
        "serpent",
        "stallion",
    ),
)

# ---------------------------------------------------------------------------
# Airport fashion (three independent axes)
# ---------------------------------------------------------------------------

AIRPORT_FASHION_LOOKS = Vocabulary(
    "airport_fashion_look",
    (
        "Monochrome ivory pantsuit with oversized blazer and platform sneakers",
        "Off-shoulder knitted sweater with mini skirt and chunky boots",
        "Slim-fit black turtleneck tucked into wide-leg denim with designer handbag",
        "Crop bomber jacket with high-waisted joggers and a face mask pulled down",
        "Pastel cardigan over ribbed tank top and flared jeans with platform loafers",
        "Graphic Y2K tee tucked into pleated mini skirt with leg warmers",
        "Structured trench coat draped over shoulders with small crossbody bag",
        "All-black airport security chic: long coat, cap, sunglasses",
        "Pink two-piece lounge set with fuzzy slippers and a canvas tote",
        "Cropped leather jacket, cargo pants, and white sunglasses",
    ),
)

AIRPORT_SCENES = Vocabulary(
    "airport_scene",
    (
        "Airport crosswalk with paparazzi slightly blurred in the distance",
        "Arrival zone outside the terminal, backdrop of buses and signage",
        "Luxury car pulling up at the airport curb as she walks past",
        "Mid-crosswalk with dramatic shadow lines and airport logo in the background",
        "Fans behind a security barrier snapping photos near the baggage area",
        "Empty early-morning crosswalk, minimal background noise",
        "Crosswalk wet from rain, faint airport reflections on the ground",
        "High-angle airport escalator shot with branding in the background",
        "Runway-lit exit gate corridor with the airport lounge behind her",
        "Night-lit crosswalk with terminal entrance doors glowing behind her",
    ),
)

AIRPORT_TIME_OF_DAY = Vocabulary(
    "airport_time_of_day",
    (
        "Golden hour sunlight casting soft shadows across the crosswalk",
        "Cloudy daylight with natural diffused light and no harsh contrast",
        "Bright midday sun with sharp airport lines and strong reflections",
        "Early morning blue-hour glow with crisp, cool lighting",
        "Late afternoon shadow play with warm tones and depth",
        "Nighttime artificial lighting from terminal signs and cars",
        "Rainy evening with wet pavement reflecting crosswalk lights",
        "Overcast afternoon with cool tones and no shadows",
    ),
)

# ---------------------------------------------------------------------------
# Paper pop: one coherent theme bundle per draw
# ---------------------------------------------------------------------------

PAPER_POP_THEMES = Vocabulary(
    "paper_pop_theme",
    (
        {
            "color_name": "tangerine orange",
            "head_pose": "tilted sideways",
            "expression": "tongue out, eyes wide with joy",
            "blush": "dewy orange blush",
            "lip": "peach-tinted gloss",
            "liner": "soft neon orange liner",
            "hair_style": "wild curls",
            "hair_color": "warm chestnut",
            "rip_style": "energetic rips and playful fold-outs",
            "lighting": "high-key sunlight glow",
            "extra": "freckles across cheeks",
            "hair_detail": "colorful barrettes",
            "mood_line": "She's not breaking the rules: she is the rule.",
        },
        {
            "color_name": "lavender purple",
            "head_pose": "chin lifted slightly",
            "expression": "soft wink and half smile",
            "blush": "violet cream blush",
            "lip": "mauve gloss",
            "liner": "soft lilac shimmer liner",
            "hair_style": "space buns",
            "hair_color": "ash brown",
            "rip_style": "soft curled folds",
            "lighting": "diffused lavender studio light",
            "extra": "tiny silver freckles",
            "hair_detail": "star clips",
            "mood_line": "She glows in her own gravity.",
        },
        {
            "color_name": "lemon yellow",
            "head_pose": "slightly turned",
            "expression": "cheeky grin with raised brow",
            "blush": "sunbeam yellow blush",
            "lip": "clear gloss",
            "liner": "pastel yellow liner",
            "hair_style": "sleek bob",
            "hair_color": "honey blonde",
            "rip_style": "rounded tear lines",
            "lighting": "warm studio flash",
            "extra": "sun freckles",
            "hair_detail": "tiny bow clips",
            "mood_line": "She's citrus-coded chaos.",
        },
        {
            "color_name": "cotton candy pink",
            "head_pose": "facing forward",
            "expression": "pouty lips and glossy stare",
            "blush": "baby pink gloss blush",
            "lip": "bubblegum gloss",
            "liner": "pearl white liner",
            "hair_style": "high pigtails",
            "hair_color": "soft blonde",
            "rip_style": "curled torn edges",
            "lighting": "milky light bloom",
            "extra": "none",
            "hair_detail": "pearl clips",
            "mood_line": "Too sweet to block, too sharp to ignore.",
        },
        {
            "color_name": "mint green",
            "head_pose": "head tilted back",
            "expression": "eyes closed mid-laugh",
            "blush": "pale peach tint",
            "lip": "mint-sheen gloss",
            "liner": "soft green liner",
            "hair_style": "messy bun",
            "hair_color": "dark brown",
            "rip_style": "clean folded tears",
            "lighting": "cool daylight flash",
            "extra": "tiny sparkle freckles",
            "hair_detail": "chrome pins",
            "mood_line": "She's freshness with attitude.",
        },
        {
            "color_name": "cherry red",
            "head_pose": "chin slightly down, tilted toward camera",
            "expression": "lips parted with a confident stare",
            "blush": "deep crimson blush high on the cheeks",
            "lip": "matte red lipstick",
            "liner": "sharp winged liner in dark red",
            "hair_style": "messy layered bob",
            "hair_color": "jet black",
            "rip_style": "angular tear lines with sharp points",
            "lighting": "hot beauty flash with red bounce",
            "extra": "freckles in the shape of tiny hearts",
            "hair_detail": "metallic red bobby pins",
            "mood_line": "She doesn't just enter, she ruptures the frame.",
        },
        {
            "color_name": "matte white",
            "head_pose": "head tilted up, eyes half-lidded",
            "expression": "closed mouth smile, soft glow stare",
            "blush": "cloudy peach blush",
            "lip": "clear gloss with white shimmer",
            "liner": "white pastel liner",
            "hair_style": "soft halo bun",
            "hair_color": "platinum blonde",
            "rip_style": "soft folds like flower petals",
            "lighting": "milky softbox with high exposure glow",
            "extra": "glossy freckles with holographic sparkles",
            "hair_detail": "tiny pearl barrettes",
            "mood_line": "She came wrapped in light, now you can't look away.",
        },
        {
            "color_name": "mirror black",
            "head_pose": "facing forward, low chin, intense gaze",
            "expression": "deadpan pout",
            "blush": "smoky gray contour",
            "lip": "black gloss lips",
            "liner": "shiny jet black cat eye",
            "hair_style": "wet-look long layers",
            "hair_color": "blue-black",
            "rip_style": "ripped like vinyl with shiny folds",
            "lighting": "spotlight from above with black reflections",
            "extra": "freckles in matte black dots",
            "hair_detail": "tiny silver rings in strands",
            "mood_line": "She's the blackout filter no one can block.",
        },
    ),
)

# ---------------------------------------------------------------------------
# Venom ceremony (five independent axes)
# ---------------------------------------------------------------------------

VENOM_FASHION_LOOKS = Vocabulary(
    "venom_fashion_look",
    (
        "Sculpted black latex bodice with serpent embossing and sharp shoulder cuts",
        "Glossy black latex dress with corset center and sheer cutout panels",
        "Black latex catsuit with high neck and open chest window",
        "Structured black latex armor top with scale patterns and sheer chiffon skirt",
        "Tight black latex halter with gold spine detailing and high-cut hips",
        "Long-sleeve black latex gown with thigh slit and high collar",
        "Cropped latex top with matching high-waisted latex skirt and gold ring belt",
        "Deep-cut latex wrap dress with gold detailing across the waist",
        "Latex bodice with sheer structured sleeves and black velvet corset lacing",
        "Off-shoulder latex dress with claw-like gold shoulder jewelry",
    ),
)

VENOM_SYMBOLS = Vocabulary(
    "venom_symbol",
    (
        "Black snake wrapped around the neck like a living necklace",
        "Snake curled on the wrist, posed as if whispering",
        "Gold ceremonial dagger strapped to the thigh with velvet bands",
        "Thin venom-drop tattoos across the collarbone in a ritual pattern",
        "Coiled snake bracelet with glowing eyes",
        "Gold rings shaped like serpent heads biting their tails",
        "Tiny black rune symbols glowing faintly on the exposed back",
        "One snake coiled gently around the waist like a belt",
        "Dagger in hand, pointed downward, ceremonial not violent",
        "Black pendant with a snake-shaped metal frame resting on the chest",
    ),
)

VENOM_ENVIRONMENTS = Vocabulary(
    "venom_environment",
    (
        "Candlelit temple chamber with pillars shaped like snakes",
        "Cracked black stone floor with molten gold glowing in the seams",
        "Large ceremonial circle drawn in ash around the feet",
        "Golden walls with slow-moving shadow shapes in the distance",
        "Serpent statue throne behind, partially blurred",
        "Smoldering ritual pit to one side, casting red flicker",
        "Tall narrow hallway lit by rows of floor candles",
        "Onyx staircase descending behind, shrouded in smoke",
        "Black silk curtains flowing behind in still air",
        "Large circular mirror on the floor reflecting only firelight and shadow",
    ),
)

VENOM_LIGHTING = Vocabulary(
    "venom_lighting",
    (
        "Lit only by flickering candles and fire at ground level",
        "Warm gold firelight casting reflections on latex and smoke",
        "Candle glow from one side, deep shadow on the other",
        "Firepit below illuminating from underneath, face half-lit",
        "Golden ritual flames behind the silhouette, forming a halo",
        "Soft side lighting from torches, front in shadow",
        "Reflected firelight from cracked floor tiles lighting the outline",
        "Glowing symbols on the wall casting an ambient red hue",
        "Smoke catching and diffusing the candlelight",
        "No overhead light, only natural flicker and glow",
    ),
)

VENOM_POSES = Vocabulary(
    "venom_pose",
    (
        "One leg forward, hips turned slightly, hand on hip, confident stare",
        "Arms down, one hand relaxed, the other near the shoulder",
        "Kneeling on one knee, hand resting on thigh, gaze forward",
        "Standing tall with chin slightly up, arms behind back",
        "One arm raised slowly in a ritual pose, palm open",
        "Back arched slightly, dagger at the side, legs apart",
        "One foot forward, shoulder angled toward camera, face in shadow",
        "Holding the dagger with both hands in front of the chest",
        "Arm wrapped gently across the torso as if holding in power",
        "Standing still, symmetrical, both hands down, letting the scene speak",
    ),
)


# ---------------------------------------------------------------------------
# Colorcore
# ---------------------------------------------------------------------------


def _styling(*items: str) -> str:
    return ", ".join(items)


COLORCORE_THEMES = Vocabulary(
    "colorcore_theme",
    (
        {
            "color": "punchy neon yellow",
            "color_description": "electric, bold, and eye-catching",
            "female_styling": _styling(
                "crop tops with puff sleeves",
                "oversized hoodies",
                "knit cardigans",
                "mini dresses",
                "satin camisoles",
                "flowy pastel blouses",
                "mesh tops",
                "off-shoulder tops",
                "high-neck tunics with belt",
                "matching co-ord sets",
                "with heart-shaped sunglasses or colored tinted glasses",
                "with cat ears or bunny ears headband",
                "with chunky hoop earrings or chokers",
            ),
            "male_styling": _styling(
                "oversized tees", "bomber jackets", "sleeveless vests", "long tunics", "casual hoodies"
            ),
        },
        {
            "color": "bold hot pink",
            "color_description": "punchy, vibrant, and energetic",
            "female_styling": _styling(
                "crop tops with prints",
                "oversized hoodies",
                "satin camisoles",
                "mini dresses",
                "mesh tops with sheer layers",
                "off-shoulder tops",
                "flowy pastel blouses",
                "lingerie-inspired tops",
                "matching co-ord sets",
                "with heart-shaped sunglasses or Y2K shades",
                "with cat ears or oversized bows",
                "with chunky hoop earrings or long dangling earrings",
            ),
            "male_styling": _styling(
                "pink button-ups", "soft hoodies", "linen shirts", "casual tees", "streetwear jackets"
            ),
        },
        {
            "color": "vivid purple",
            "color_description": "bold, striking, and intense",
            "female_styling": _styling(
                "knit cardigans",
                "flowy pastel blouses",
                "mini dresses",
                "long-sleeve modest dresses",
                "satin camisoles",
                "crop tops",
                "high-neck tunics with belt",
                "matching co-ord sets",
                "with round Harry Potter glasses or frameless glasses",
                "with flower crowns or pearl headbands",
                "with chokers and beaded bracelets",
            ),
            "male_styling": _styling(
                "purple polos", "light jackets", "dress shirts", "casual sweaters", "oversized hoodies"
            ),
        },
        {
            "color": "electric lime green",
            "color_description": "punchy, fresh, and vibrant",
            "female_styling": _styling(
                "crop tops",
                "oversized hoodies",
                "mesh tops",
                "mini dresses",
                "satin camisoles",
                "off-shoulder tops",
                "matching co-ord sets",
                "flowy pastel blouses",
                "with colored tinted glasses",
                "with bucket hats or berets",
                "with chunky hoop earrings or stackable rings",
            ),
            "male_styling": _styling(
                "lime tees", "athletic shirts", "casual polos", "light jackets", "oversized hoodies"
            ),
        },
        {
            "color": "bright tangerine orange",
            "color_description": "energetic, bold, and fiery",
            "female_styling": _styling(
                "crop tops with prints",
                "oversized hoodies",
                "mini dresses",
                "satin camisoles",
                "mesh tops",
                "matching co-ord sets",
                "off-shoulder tops",
                "with Y2K shades or heart-shaped sunglasses",
                "with oversized bows or hair clips",
                "with long dangling earrings or chokers",
            ),
            "male_styling": _styling(
                "orange shirts", "bold tees", "statement jackets", "warm sweaters", "casual hoodies"
            ),
        },
        {
            "color": "pure black",
            "color_description": "sleek, powerful, and bold",
            "female_styling": _styling(
                "crop tops",
                "oversized hoodies",
                "mesh tops with sheer layers",
                "mini dresses",
                "satin camisoles",
                "off-shoulder tops",
                "lingerie-inspired tops",
                "matching co-ord sets",
                "with frameless glasses or round glasses",
                "with chokers and stackable rings",
                "with chunky hoop earrings",
            ),
            "male_styling": _styling(
                "black shirts", "leather jackets", "dress shirts", "classic tees", "oversized hoodies"
            ),
        },
    ),
)

# Several poses are drawn per render, so this needs at least as many
# entries as the widest multi-pick axis that uses it.
COLORCORE_POSES = Vocabulary(
    "colorcore_pose",
    (
        "finger heart",
        "peace sign under the chin",
        "both hands under face (kawaii)",
        "tongue out with tilted head",
        "chin resting on back of hand",
        "framing face with both hands",
        "elbow out and winking",
        "side profile smirk",
        "one hand raised above head",
        "leaning forward like a model",
        "eyes wide open with hands near cheeks",
        "V-sign over one eye",
    ),
)


ALL_VOCABULARIES: Tuple[Vocabulary, ...] = (
    SMOKE_COLORS,
    CRYSTAL_COLORS,
    BUTTERFLY_COLORS,
    REFLECTION_PACT_ANIMALS,
    MOLTEN_GLOSS_ANIMALS,
    AIRPORT_FASHION_LOOKS,
    AIRPORT_SCENES,
    AIRPORT_TIME_OF_DAY,
    PAPER_POP_THEMES,
    VENOM_FASHION_LOOKS,
    VENOM_SYMBOLS,
    VENOM_ENVIRONMENTS,
    VENOM_LIGHTING,
    VENOM_POSES,
    COLORCORE_THEMES,
    COLORCORE_POSES,
)
