# presets/professional.py

"""
Professional photo-editing presets (diffusion model).

Color grades and looks tuned for safe image-to-image: nominal strengths
sit inside the professional band and the router clamps them again
anyway. Every prompt carries the identity-preservation suffix; the
single-frame guard is prepended by the router at payload time.

Also holds the randomized creative presets. Their `base_prompt` is a
`{TOKEN}` template rendered per request by the named fragment generator,
and `prompt` is a pre-rendered default instance for listings.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Tuple

from .schema import PresetEntry, PresetFamily

_FAMILY = PresetFamily.PROFESSIONAL

SINGLE_FRAME_GUARD = (
    "Render as one continuous single frame (no grid, collage, split-screen, mirror, border "
    "or frame). Show only one instance of the subject."
)

PRESERVE_IDENTITY = (
    "Preserve the original composition, camera crop, subject identity and facial geometry. "
    "Do not add or remove objects. Keep background layout unchanged."
)

BASE_NEGATIVE_PROMPT = (
    "duplicate face, extra face, extra limb, split screen, collage, grid, diptych, mirror, "
    "border, frame, text, caption, watermark, logo, signature, anime, cartoon, 2D, low "
    "quality, jpeg artifacts, oversharpened, waxy skin, deformed, distorted, unrealistic"
)

# Featured rotation: five looks per slot, slots cycle week by week.
_WEEKLY_ROTATION: Tuple[Tuple[str, ...], ...] = (
    ("cinematic_glow", "bright_airy", "vivid_pop", "vintage_film_35mm", "tropical_boost"),
    ("urban_grit", "mono_drama", "dreamy_pastels", "golden_hour_magic", "high_fashion_editorial"),
    ("moody_forest", "desert_glow", "retro_polaroid", "crystal_clear", "ocean_breeze"),
    ("festival_vibes", "noir_classic", "sun_kissed", "frost_light", "neon_nights"),
    ("cultural_glow", "soft_skin_portrait", "rainy_day_mood", "wildlife_focus", "street_story"),
)

ROTATION_WEEKS = len(_WEEKLY_ROTATION)

_WEEK_OF: Dict[str, int] = {
    preset_id: week
    for week, preset_ids in enumerate(_WEEKLY_ROTATION, start=1)
    for preset_id in preset_ids
}


def _negative(extra: Optional[str]) -> str:
    return f"{BASE_NEGATIVE_PROMPT}, {extra}" if extra else BASE_NEGATIVE_PROMPT


def _look(
    id: str,
    label: str,
    tag: str,
    body: str,
    strength: float,
    description: str,
    category: str,
    negative_extra: Optional[str] = None,
) -> PresetEntry:
    return PresetEntry(
        id=id,
        label=label,
        family=_FAMILY,
        prompt=f"{body} {PRESERVE_IDENTITY}",
        negative_prompt=_negative(negative_extra),
        strength=strength,
        tag=tag,
        description=description,
        category=category,
        week=_WEEK_OF.get(id),
        features=("color_grade", "identity_preserved"),
    )


def _prerender(template: str, values: Dict[str, str]) -> str:
    out = template
    for token, value in values.items():
        out = out.replace("{" + token + "}", value)
    return out


def _randomized(
    id: str,
    label: str,
    tag: str,
    template: str,
    generator: str,
    defaults: Dict[str, str],
    strength: float,
    description: str,
    negative_extra: Optional[str] = None,
) -> PresetEntry:
    return PresetEntry(
        id=id,
        label=label,
        family=_FAMILY,
        prompt=_prerender(template, defaults),
        negative_prompt=_negative(negative_extra),
        strength=strength,
        tag=tag,
        description=description,
        category="creative",
        features=("randomized", "identity_preserved"),
        is_randomized=True,
        base_prompt=template,
        generator=generator,
    )


_LOOKS: List[PresetEntry] = [
    _look(
        "cinematic_glow", "Cinematic Glow", "Cinematic",
        "Enhance with cinematic color grading: warm highlights, deep shadows, rich blacks, "
        "subtle teal-orange balance. Keep skin natural.",
        0.16, "Professional cinematic look with teal-orange balance", "cinematic",
        "harsh color shifts",
    ),
    _look(
        "bright_airy", "Clean Minimal", "Minimalist",
        "Clean, airy edit: soft light, pastel tones, balanced whites, gentle shadows. Ideal "
        "for lifestyle and wellness.",
        0.12, "Clean, minimal aesthetic for lifestyle content", "minimal",
        "crushed blacks, blown highlights",
    ),
    _look(
        "vivid_pop", "Color Pop", "Vibrant",
        "Boost saturation and micro-contrast for vibrant, punchy color while keeping skin "
        "tones realistic.",
        0.18, "Bold, vibrant colors suited to social media", "vibrant",
        "posterization, oversaturation",
    ),
    _look(
        "vintage_film_35mm", "Film Look 35mm", "Vintage",
        "Retro 35mm vibe: warm faded tones, subtle fine film grain (not digital noise), soft "
        "shadows; keep detail intact.",
        0.18, "Classic film aesthetic with warm, nostalgic tones", "vintage",
        "digital noise, plastic skin",
    ),
    _look(
        "tropical_boost", "Tropical Vibes", "Travel",
        "Enhance blues and greens with warm sunlit tones; gentle HDR for landscapes; keep "
        "people natural.",
        0.18, "Tropical colors for travel scenes", "vibrant",
        "cyan shift on skin",
    ),
    _look(
        "urban_grit", "Urban Grit", "Urban",
        "Desaturated blues, strong contrast, crisp micro-detail; modern street mood without "
        "changing layout.",
        0.18, "Gritty, modern city aesthetic", "vibrant",
        "halos, over-sharpening",
    ),
    _look(
        "mono_drama", "B&W Drama", "Black & White",
        "Convert to rich black and white: strong contrast, bright highlights, detailed "
        "textures; filmic tonality.",
        0.20, "Dramatic B&W with strong contrast", "cinematic",
        "color",
    ),
    _look(
        "dreamy_pastels", "Soft Pastel Glow", "Soft",
        "Soft-focus glow, pastel palette, warm highlights; flattering but natural detail "
        "retention.",
        0.14, "Soft, dreamy aesthetic", "cinematic",
        "haze artifacts, plastic skin",
    ),
    _look(
        "golden_hour_magic", "Golden Hour Magic", "Warm",
        "Simulate golden hour: warm tones, glowing highlights, soft rolloff in shadows; keep "
        "skin natural.",
        0.16, "Warm golden hour simulation", "cinematic",
        "orange cast on whites",
    ),
    _look(
        "high_fashion_editorial", "Fashion Editorial", "Editorial",
        "Sleek editorial finish: gently desaturated palette, strong contrast, subtle skin "
        "polish that retains pores, magazine clean.",
        0.18, "Editorial look for fashion content", "cinematic",
        "over-smoothing, plastic skin",
    ),
    _look(
        "moody_forest", "Forest Mood", "Nature",
        "Deep greens, soft diffused light, subtle fog atmosphere; maintain natural luminance "
        "separation.",
        0.16, "Moody forest atmosphere", "nature",
        "color cast on skin",
    ),
    _look(
        "desert_glow", "Golden Dunes", "Travel",
        "Warm sandy palette, golden highlights, gentle texture and clarity for dunes; avoid "
        "halos.",
        0.16, "Warm desert tones", "vintage",
        "cyan shadows",
    ),
    _look(
        "retro_polaroid", "Instant Retro", "Vintage",
        "Warm faded tones, soft focus, subtle edge vignette (not a hard frame) for an "
        "instant-camera feel.",
        0.16, "Retro instant camera aesthetic", "vintage",
    ),
    _look(
        "crystal_clear", "Sharp Clarity", "Clarity",
        "Increase clarity and sharpness, remove haze, keep colors true to life; retain "
        "natural skin texture.",
        0.12, "Maximum clarity with natural rendering", "minimal",
        "halos, over-sharpening, crunchy detail",
    ),
    _look(
        "ocean_breeze", "Coastal Air", "Travel",
        "Bright ocean blues, clean whites, airy highlights; crisp yet soft coastal feel.",
        0.14, "Clean coastal aesthetic", "nature",
        "cyan skin",
    ),
    _look(
        "festival_vibes", "Vibrant Festival", "Vibrant",
        "Rich saturation, warm highlights, slight vignette for lively festival energy; keep "
        "faces true.",
        0.20, "Lively, colorful festival atmosphere", "vibrant",
        "neon clipping, oversaturation",
    ),
    _look(
        "noir_classic", "Noir Cinema", "Black & White",
        "High-contrast monochrome with deep blacks and crisp detail; timeless cinematic mood.",
        0.20, "Classic high-contrast noir", "cinematic",
        "color",
    ),
    _look(
        "sun_kissed", "Warm Glow", "Warm",
        "Golden warmth, soft shadows, glowing skin tones for outdoor sunlight; protect whites.",
        0.16, "Natural sunlit warmth", "vibrant",
        "orange cast on whites",
    ),
    _look(
        "frost_light", "Winter Chill", "Cool",
        "Cool blues and crisp whites; enhance snow texture without gray mush; keep skin "
        "neutral.",
        0.16, "Cool winter aesthetic", "nature",
        "muddy snow",
    ),
    _look(
        "neon_nights", "Neon Nights", "Urban",
        "Vivid neon color contrast with deep blacks and high clarity for night city scenes; "
        "protect skin tones.",
        0.20, "Vibrant neon city night look", "vibrant",
        "banding, neon clipping",
    ),
    _look(
        "cultural_glow", "Cultural Heritage", "Travel",
        "Enhance traditional fabrics, patterns and natural light; emphasize authentic color "
        "and texture.",
        0.16, "Cultural richness with natural lighting", "nature",
        "artificial tint",
    ),
    _look(
        "soft_skin_portrait", "Natural Portrait", "Portrait",
        "Subtle skin polish and color correction with soft background separation; retain "
        "pores and natural texture.",
        0.12, "Natural portrait with gentle enhancement", "minimal",
        "plastic skin, over-smoothing",
    ),
    _look(
        "rainy_day_mood", "Rain Mood", "Moody",
        "Cool tonal palette, soft reflections, subtle rain atmosphere; preserve contrast in "
        "midtones.",
        0.16, "Moody rainy atmosphere", "nature",
        "muddy midtones",
    ),
    _look(
        "wildlife_focus", "Wildlife Detail", "Nature",
        "Enhance fur, feather and scale detail with natural tones; gently blur the "
        "background for separation if needed.",
        0.16, "Natural detail for wildlife", "nature",
        "over-sharpening, artifacting",
    ),
    _look(
        "street_story", "Urban Portrait", "Urban",
        "Documentary street contrast, rich shadows, enhanced textures; keep story elements "
        "intact.",
        0.18, "Documentary street aesthetic", "minimal",
        "halos, crunchy grain",
    ),
    _look(
        "express_enhance", "Express Enhance", "Clarity",
        "Quick clarity boost: sharpen, dehaze and polish without altering composition or "
        "skin realism.",
        0.12, "Fast polish: clarity and dehaze", "minimal",
        "halos, plastic skin",
    ),
]


_RANDOMIZED: List[PresetEntry] = [
    _randomized(
        "smoke_bloom", "Smoke Bloom", "Smoke",
        "Surround the subject with slow, billowing plumes of {SMOKE_COLOR} smoke that curl "
        "around the shoulders and drift into the background. Studio-dark backdrop, soft rim "
        "light catching the edges of the {SMOKE_COLOR} haze, photoreal skin. "
        f"{PRESERVE_IDENTITY}",
        "smoke_color",
        {"SMOKE_COLOR": "deep crimson"},
        0.18, "Colored smoke plumes with a rotating palette",
        "fire, flames, fog wall covering the face",
    ),
    _randomized(
        "crystal_fall", "Crystal Fall", "Crystal",
        "Shards of {CRYSTAL_COLOR} crystal fall and hang in the air around the subject, "
        "refracting light into soft prismatic flares. Dark glossy backdrop, sharp focus on "
        f"the face. {PRESERVE_IDENTITY}",
        "crystal_color",
        {"CRYSTAL_COLOR": "icy aquamarine"},
        0.18, "Suspended crystal shards in a rotating color",
        "glass cuts, blood, shattered face",
    ),
    _randomized(
        "butterfly_monarch", "Butterfly Monarch", "Butterfly",
        "A swarm of {PRIMARY_COLOR} butterflies with {SECONDARY_COLOR} wing edges settles "
        "around the subject's shoulders and hair, a few in mid-flight. Clean "
        "{BACKGROUND_GRADIENT} background, soft beauty light, delicate wing detail. "
        f"{PRESERVE_IDENTITY}",
        "butterfly_color",
        {
            "PRIMARY_COLOR": "electric blue",
            "SECONDARY_COLOR": "vivid blue",
            "BACKGROUND_GRADIENT": "soft indigo gradient",
        },
        0.18, "Butterfly swarm with a coordinated color scheme",
        "insects on the face, moths, bugs covering eyes",
    ),
    _randomized(
        "reflection_pact", "Reflection Pact", "Companion",
        "The subject stands face to face with a {ANIMAL} at the edge of a still, dark lake. "
        "Their reflections meet on the water surface, a quiet pact between person and "
        "{ANIMAL}. Cold moonlight, thin mist, photoreal fur and skin detail. "
        f"{PRESERVE_IDENTITY}",
        "reflection_pact_animal",
        {"ANIMAL": "black panther"},
        0.2, "A mirrored pact with a rotating animal companion",
        "hybrid creature, animal face on human, extra animals",
    ),
    _randomized(
        "molten_gloss", "Molten Gloss", "Gloss",
        "A sculpted {ANIMAL} cast in molten liquid chrome coils beside the subject, its "
        "surface dripping and reflecting the studio lights. High-gloss editorial lighting, "
        f"deep black background. {PRESERVE_IDENTITY}",
        "molten_gloss_animal",
        {"ANIMAL": "panther"},
        0.2, "Liquid-chrome animal sculpture beside the subject",
        "melting face, chrome skin, metallic person",
    ),
    _randomized(
        "airport_fashion", "Airport Fashion", "Fashion",
        "Paparazzi-style candid of the subject walking through an airport in "
        "{FASHION_INJECTION_HERE}. Setting: {SCENE_INJECTION_HERE}. Light: "
        "{TIME_OF_DAY_INJECTION_HERE}. Editorial street photography, long lens, natural "
        f"motion. {PRESERVE_IDENTITY}",
        "airport_fashion",
        {
            "FASHION_INJECTION_HERE": (
                "Monochrome ivory pantsuit with oversized blazer and platform sneakers"
            ),
            "SCENE_INJECTION_HERE": (
                "Airport crosswalk with paparazzi slightly blurred in the distance"
            ),
            "TIME_OF_DAY_INJECTION_HERE": (
                "Golden hour sunlight casting soft shadows across the crosswalk"
            ),
        },
        0.2, "Celebrity airport look with rotating outfit, scene and light",
        "runway, catwalk, studio backdrop",
    ),
    _randomized(
        "paper_pop", "Paper Pop", "Pop",
        "The subject bursts through a torn sheet of {COLOR_NAME} paper, head {HEAD_POSE}, "
        "{EXPRESSION}. Makeup: {BLUSH}, {LIP}, {LINER}. Skin detail: {EXTRA}. Hair: "
        "{HAIR_STYLE} in {HAIR_COLOR}, finished with {HAIR_DETAIL}. Paper edges show "
        "{RIP_STYLE}. Lighting: {LIGHTING}. Bold {COLOR_NAME} color story, glossy "
        "beauty-campaign finish. Mood: {MOOD_LINE} "
        f"{PRESERVE_IDENTITY}",
        "paper_pop",
        {
            "COLOR_NAME": "tangerine orange",
            "HEAD_POSE": "tilted sideways",
            "EXPRESSION": "tongue out, eyes wide with joy",
            "BLUSH": "dewy orange blush",
            "LIP": "peach-tinted gloss",
            "LINER": "soft neon orange liner",
            "HAIR_STYLE": "wild curls",
            "HAIR_COLOR": "warm chestnut",
            "RIP_STYLE": "energetic rips and playful fold-outs",
            "LIGHTING": "high-key sunlight glow",
            "EXTRA": "freckles across cheeks",
            "HAIR_DETAIL": "colorful barrettes",
            "MOOD_LINE": "She's not breaking the rules: she is the rule.",
        },
        0.2, "Torn-paper beauty shot with a coordinated color theme",
        "cardboard, crumpled face, paper mask",
    ),
    _randomized(
        "venom_ceremony", "Venom Ceremony", "Dark Ritual",
        "A dark, elegant ritual portrait. Outfit: {FASHION_INJECTION_HERE}. Ritual detail: "
        "{SYMBOL_INJECTION_HERE}. Setting: {ENVIRONMENT_INJECTION_HERE}. Lighting: "
        "{LIGHTING_INJECTION_HERE}. Pose: {POSE_INJECTION_HERE}. Cinematic, high-fashion, "
        f"photoreal. {PRESERVE_IDENTITY}",
        "venom_ceremony",
        {
            "FASHION_INJECTION_HERE": (
                "Sculpted black latex bodice with serpent embossing and sharp shoulder cuts"
            ),
            "SYMBOL_INJECTION_HERE": "Black snake wrapped around the neck like a living necklace",
            "ENVIRONMENT_INJECTION_HERE": "Candlelit temple chamber with pillars shaped like snakes",
            "LIGHTING_INJECTION_HERE": "Lit only by flickering candles and fire at ground level",
            "POSE_INJECTION_HERE": (
                "One leg forward, hips turned slightly, hand on hip, confident stare"
            ),
        },
        0.2, "Gothic ritual editorial with five rotating elements",
        "gore, blood, violence, horror",
    ),
    _randomized(
        "colorcore", "Colorcore", "Colorcore",
        "A punchy single-color photoshoot drenched in {COLOR}: backdrop, props and light "
        "all share the same hue, the mood {COLOR_DESCRIPTION}. Styling if female: "
        "{FEMALE_STYLING}. Styling if male: {MALE_STYLING}. Playful poses such as {POSES}. "
        "Clean studio flash, saturated color, crisp fashion-editorial finish. "
        f"{PRESERVE_IDENTITY}",
        "colorcore",
        {
            "COLOR": "punchy neon yellow",
            "COLOR_DESCRIPTION": "electric, bold, and eye-catching",
            "FEMALE_STYLING": "crop tops with puff sleeves, oversized hoodies, mini dresses",
            "MALE_STYLING": "oversized tees, bomber jackets, casual hoodies",
            "POSES": (
                "finger heart, peace sign under the chin, side profile smirk, "
                "V-sign over one eye"
            ),
        },
        0.2, "Monochrome color-story shoot with rotating palette and poses",
        "multiple people, duplicate subject, muted colors",
    ),
]


PROFESSIONAL_PRESETS: List[PresetEntry] = _LOOKS + _RANDOMIZED


def presets_by_category(category: str) -> List[PresetEntry]:
    return [p for p in PROFESSIONAL_PRESETS if p.category == category]


def all_categories() -> List[str]:
    seen: List[str] = []
    for preset in PROFESSIONAL_PRESETS:
        if preset.category and preset.category not in seen:
            seen.append(preset.category)
    return seen


def current_week(today: date) -> int:
    """Featured-rotation slot (1-based) for `today`, counted from Jan 1."""
    days_since_new_year = today.timetuple().tm_yday - 1
    return days_since_new_year // 7 % ROTATION_WEEKS + 1


def current_week_presets(today: Optional[date] = None) -> List[PresetEntry]:
    week = current_week(today or date.today())
    return [p for p in PROFESSIONAL_PRESETS if p.week == week]
