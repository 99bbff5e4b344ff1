"""
Constants and configuration values for the pixel-transformation engine.
"""

# Channel range
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Results are snapped to this many decimals before rounding so that literal
# coefficients (0.349 * 200 + ...) land on their decimal value
ROUND_DECIMALS = 6

# Luma weights used by the saturation matrix
LUMA_R = 0.213
LUMA_G = 0.715
LUMA_B = 0.072

# Contrast matrices pivot around mid-gray
CONTRAST_PIVOT = 0.5

# Separable box blur
BLUR_RADIUS_MIN = 1
BLUR_RADIUS_MAX = 10
BLUR_DEFAULT_RADIUS = 5
BLUR_OUTPUT_ALPHA = 255

# Emboss
EMBOSS_KERNEL = (
    (-2.0, -1.0, 0.0),
    (-1.0, 1.0, 1.0),
    (0.0, 1.0, 2.0),
)
EMBOSS_OFFSET = 128.0

# Adjustment sliders
ADJUSTMENT_MIN = -100.0
ADJUSTMENT_MAX = 100.0
EXPOSURE_STOPS_DIVISOR = 50.0  # exposure 50 == one stop

# Tone and color sliders (-100..100, vignette 0..100)
TONE_LUMA_R = 0.2126
TONE_LUMA_G = 0.7152
TONE_LUMA_B = 0.0722
HIGHLIGHT_EDGES = (0.55, 1.0)
SHADOW_EDGES = (0.0, 0.45)
WARMTH_SHIFT = 24.0          # R up, B down at warmth 100
TINT_GREEN_SHIFT = -18.0     # magenta at tint 100
TINT_RED_BLUE_SHIFT = 9.0
HUE_DEGREES_PER_UNIT = 1.8   # hue 100 == 180 degrees
VIGNETTE_EDGES = (0.4, 1.05)
VIGNETTE_MAX_DISTANCE = 1.2

# Post effects (0..100)
EFFECT_MIN = 0.0
EFFECT_MAX = 100.0
SHARPEN_KERNEL = (
    (0.0, -1.0, 0.0),
    (-1.0, 5.0, -1.0),
    (0.0, -1.0, 0.0),
)
DEFINITION_GAIN = 0.9
