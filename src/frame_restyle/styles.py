"""Art styles and the prompt text each backend receives for them."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ArtStyle(str, Enum):
    """Artistic styles a frame can be regenerated in."""

    REALISTIC = "Hyper-Realistic"
    CARTOON = "Vibrant Cartoon"
    THREE_D_PIXAR = "3D Pixar Style"
    ANIME = "Japanese Anime"
    VINTAGE_PHOTO = "Vintage Sepia Photograph"
    CLAYMATION = "Claymation Stop-motion"
    FANTASY_ART = "Digital Fantasy Art"
    NEON_PUNK = "Neon Punk"


# A style may also arrive as an opaque label from the presentation layer.
StyleInput = Union[ArtStyle, str]


@dataclass(frozen=True)
class StylePrompts:
    """Prompt text for one style.

    Attributes:
        instruction: Imperative sentence telling the image model how to
            transform an existing frame.
        suffix: Descriptor appended to a from-scratch text description.
    """

    instruction: str
    suffix: str


STYLE_PROMPTS: dict[ArtStyle, StylePrompts] = {
    ArtStyle.REALISTIC: StylePrompts(
        instruction=(
            "Recreate this image as an ultra-realistic, photorealistic, high-detail photograph. "
            "It should look like it was shot with a professional DSLR camera, with sharp focus and intricate details."
        ),
        suffix=", ultra-realistic, photorealistic, 8k, sharp focus, professional DSLR photo.",
    ),
    ArtStyle.CARTOON: StylePrompts(
        instruction=(
            "Recreate this image as a vibrant, colorful, bold-lined cartoon illustration in a playful style. "
            "Use cel-shading, expressive characters, and clean lines."
        ),
        suffix=", vibrant cartoon illustration, bold lines, cel-shaded, playful style.",
    ),
    ArtStyle.THREE_D_PIXAR: StylePrompts(
        instruction=(
            "Recreate this image in the style of a modern 3D animated film, like those from Pixar. "
            "It should have soft lighting, detailed textures, and expressive, rounded characters "
            "with a friendly and appealing look."
        ),
        suffix=", in the style of a 3D Pixar animated film, soft lighting, detailed textures, expressive characters.",
    ),
    ArtStyle.ANIME: StylePrompts(
        instruction=(
            "Recreate this image as a beautiful Japanese anime scene, in the style of a critically acclaimed "
            "animation studio. It should have detailed background art, cel-shaded characters, "
            "and cinematic anime lighting."
        ),
        suffix=", beautiful Japanese anime scene, style of a top animation studio, cinematic anime lighting.",
    ),
    ArtStyle.VINTAGE_PHOTO: StylePrompts(
        instruction=(
            "Recreate this image as an authentic-looking vintage sepia photograph from the early 20th century. "
            "It should have a grainy texture, faded tones, and soft focus to capture a timeless moment."
        ),
        suffix=", authentic vintage sepia photograph, grainy texture, faded tones, early 20th century.",
    ),
    ArtStyle.CLAYMATION: StylePrompts(
        instruction=(
            "Recreate this image as a charming claymation stop-motion scene with a handcrafted look. "
            "The models should be textured with visible fingerprints in the clay, and have whimsical lighting."
        ),
        suffix=", charming claymation stop-motion scene, handcrafted look, visible fingerprints in the clay.",
    ),
    ArtStyle.FANTASY_ART: StylePrompts(
        instruction=(
            "Recreate this image as an epic digital fantasy art painting. It needs ethereal lighting, "
            "intricate details, and a mythical atmosphere, in the style of a high-fantasy book cover."
        ),
        suffix=", epic digital fantasy art painting, ethereal lighting, intricate details, mythical atmosphere.",
    ),
    ArtStyle.NEON_PUNK: StylePrompts(
        instruction=(
            "Recreate this image as a neon-drenched, cyberpunk cityscape scene. It should have glowing neon "
            "lights, rainy streets with reflections, high-tech gadgets, and a dystopian 'neon punk' aesthetic."
        ),
        suffix=", neon-drenched cyberpunk cityscape, glowing neon lights, rainy streets, dystopian aesthetic.",
    ),
}


def style_label(style: StyleInput) -> str:
    """Return the display label of a style or opaque style string."""
    if isinstance(style, ArtStyle):
        return style.value
    return str(style)


def _lookup(style: StyleInput):
    try:
        return STYLE_PROMPTS.get(ArtStyle(style))
    except ValueError:
        return None


def _default_prompts(label: str) -> StylePrompts:
    """Build prompt text for a label outside the named styles.

    Used for forward compatibility with styles the catalog does not list
    yet. Always returns non-empty text that mentions the label.
    """
    return StylePrompts(
        instruction=f"Recreate this image in the style of a high-detail, cinematic image with the theme of '{label}'.",
        suffix=f", in the style of {label}.",
    )


def get_style_prompts(style: StyleInput) -> StylePrompts:
    """Return the prompt pair for ``style``, falling back to the default text."""
    prompts = _lookup(style)
    if prompts is None:
        return _default_prompts(style_label(style))
    return prompts


def instructional_prompt(style: StyleInput) -> str:
    """Instruction sent with the source frame to the image-conditioned model."""
    return get_style_prompts(style).instruction


def style_suffix(style: StyleInput) -> str:
    """Suffix appended to the base description for the text-conditioned model."""
    return get_style_prompts(style).suffix


def available_styles() -> list[str]:
    """Labels of the named styles in declaration order."""
    return [style.value for style in ArtStyle]
