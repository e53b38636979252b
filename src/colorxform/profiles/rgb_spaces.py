from .profile import Profile
from .white_points import C, D50, D65, E


CIE_RGB = Profile(
    name="CIE RGB",
    white=E,
    red=(0.7347, 0.2653, 0.0),
    green=(0.2738, 0.7174, 0.0088),
    blue=(0.1666, 0.0089, 0.8245),
)

SRGB = Profile(
    name="sRGB",
    white=D65,
    red=(0.64, 0.33, 0.03),
    green=(0.30, 0.60, 0.10),
    blue=(0.15, 0.06, 0.79),
)

ADOBE_RGB = Profile(
    name="Adobe RGB",
    white=D65,
    red=(0.64, 0.33, 0.03),
    green=(0.21, 0.71, 0.08),
    blue=(0.15, 0.06, 0.79),
)

NTSC_RGB = Profile(
    name="NTSC RGB",
    white=C,
    red=(0.67, 0.33, 0.00),
    green=(0.21, 0.71, 0.08),
    blue=(0.14, 0.08, 0.78),
)

# Bradford-adapted primaries for encoding CIE L*a*b* against D50
SRGB_D50 = Profile(
    name="sRGB D50",
    white=D50,
    red=(0.64844, 0.33086, 0.02070),
    green=(0.32117, 0.59788, 0.08095),
    blue=(0.15590, 0.06605, 0.77805),
)

ADOBE_RGB_D50 = Profile(
    name="Adobe RGB D50",
    white=D50,
    red=(0.64844, 0.33086, 0.02070),
    green=(0.23017, 0.70157, 0.06826),
    blue=(0.15590, 0.06605, 0.77805),
)

STANDARD = SRGB
