from app.exceptions import InvalidColorSchemeError, InvalidStyleError, ValidationError
from app.schemas.thumbnail import AspectRatio, ColorScheme, ThumbnailStyle

STYLE_PROMPTS: dict[ThumbnailStyle, str] = {
    ThumbnailStyle.BOLD_GRAPHIC: (
        "eye-catching thumbnail, bold typography, vibrant colors, expressive facial reaction, "
        "dramatic lighting, high contrast, click-worthy composition, professional style"
    ),
    ThumbnailStyle.TECH_FUTURISTIC: (
        "futuristic thumbnail, sleek modern design, digital UI elements, glowing accents, "
        "holographic effects, cyber-tech aesthetic, sharp lighting, high-tech atmosphere"
    ),
    ThumbnailStyle.MINIMALIST: (
        "minimalist thumbnail, clean layout, simple shapes, limited color palette, "
        "plenty of negative space, modern flat design, clear focal point"
    ),
    ThumbnailStyle.PHOTOREALISTIC: (
        "photorealistic thumbnail, ultra-realistic lighting, natural skin tones, candid moment, "
        "DSLR-style photography, lifestyle realism, shallow depth of field"
    ),
    ThumbnailStyle.ILLUSTRATED: (
        "illustrated thumbnail, custom digital illustration, stylized characters, bold outlines, "
        "vibrant colors, creative cartoon or vector art style"
    ),
}

COLOR_SCHEME_PROMPTS: dict[ColorScheme, str] = {
    ColorScheme.VIBRANT: "vibrant and energetic colors, high saturation, bold contrasts, eye-catching palette",
    ColorScheme.SUNSET: "warm sunset tones, orange pink and purple hues, soft gradients, cinematic glow",
    ColorScheme.FOREST: "natural green tones, earthy colors, calm and organic palette, fresh atmosphere",
    ColorScheme.NEON: "neon glow effects, electric blues and pinks, cyberpunk lighting, high contrast glow",
    ColorScheme.PURPLE: "purple-dominant color palette, magenta and violet tones, modern and stylish mood",
    ColorScheme.MONOCHROME: "black and white color scheme, high contrast, dramatic lighting, timeless aesthetic",
    ColorScheme.OCEAN: "cool blue and teal tones, aquatic color palette, fresh and clean atmosphere",
    ColorScheme.PASTEL: "soft pastel colors, low saturation, gentle tones, calm and friendly aesthetic",
}


def resolve_style(style: ThumbnailStyle | str) -> ThumbnailStyle:
    try:
        return ThumbnailStyle(style)
    except ValueError:
        raise InvalidStyleError(f"Unknown thumbnail style: {style}") from None


def resolve_color_scheme(color_scheme: ColorScheme | str) -> ColorScheme:
    try:
        return ColorScheme(color_scheme)
    except ValueError:
        raise InvalidColorSchemeError(f"Unknown color scheme: {color_scheme}") from None


def resolve_aspect_ratio(aspect_ratio: AspectRatio | str) -> AspectRatio:
    try:
        return AspectRatio(aspect_ratio)
    except ValueError:
        raise ValidationError(f"Unsupported aspect ratio: {aspect_ratio}") from None


def build_prompt(
    title: str,
    style: ThumbnailStyle | str,
    aspect_ratio: AspectRatio | str,
    color_scheme: ColorScheme | str | None = None,
    user_prompt: str | None = None,
) -> str:
    """
    Build the image-model prompt for a thumbnail.

    Args:
        title: Video title the thumbnail is for
        style: Style preset, must be a ThumbnailStyle value
        aspect_ratio: Output aspect ratio, must be an AspectRatio value
        color_scheme: Optional color palette preset
        user_prompt: Optional free-text details from the user

    Raises:
        InvalidStyleError: style is not a known preset
        InvalidColorSchemeError: color_scheme is given but not a known preset
        ValidationError: aspect_ratio is not supported
    """
    style = resolve_style(style)
    aspect_ratio = resolve_aspect_ratio(aspect_ratio)

    parts = [f"Create a {STYLE_PROMPTS[style]} for: {title}."]

    if color_scheme:
        color_scheme = resolve_color_scheme(color_scheme)
        parts.append(f"Use a {COLOR_SCHEME_PROMPTS[color_scheme]} color scheme.")

    if user_prompt and user_prompt.strip():
        details = user_prompt.strip()
        if not details.endswith("."):
            details += "."
        parts.append(f"Additional details: {details}")

    parts.append(
        f"The thumbnail should be {aspect_ratio.value}, visually stunning, and designed to "
        "maximize click-through rate. Make it bold, professional, and impossible to ignore."
    )

    return " ".join(parts)
