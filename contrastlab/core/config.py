#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
NIBBLE_SCALE = 17                  # 0xF * 17 == 0xFF, expands a shorthand hex digit
HUE_DEGREES = 360                  # Full circle degrees (CSS hue)
PERCENT = 100                      # Percent scale (CSS saturation, lightness, alpha)
HUE_SECTORS = 6                    # Sectors of the HSV/HSL hexcone
HUE_SECTOR_G = 2.0                 # Hue offset when green is the max channel
HUE_SECTOR_B = 4.0                 # Hue offset when blue is the max channel
ONE_THIRD = 1.0 / 3.0              # Hue offset between R, G and B in HSL -> RGB
ONE_SIXTH = 1.0 / 6.0              # First breakpoint of the hue-to-channel helper
TWO_THIRDS = 2.0 / 3.0             # Last breakpoint of the hue-to-channel helper

# sRGB Transfer Function Constants (Source: http://www.brucelindbloom.com/Eqn_RGB_to_XYZ.html)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# Perceptual Luma Coefficients (Source: NTSC / ITU-R BT.601, gamma-encoded)
NTSC_Y_R = 0.299                   # Red contribution to Y'
NTSC_Y_G = 0.587                   # Green contribution to Y'
NTSC_Y_B = 0.114                   # Blue contribution to Y'

# sRGB to XYZ Matrix (Source: sRGB D65, Bruce Lindbloom)
M_SRGB_XYZ_X = (0.412453, 0.357580, 0.180423)   # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.212671, 0.715160, 0.072169)   # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.019334, 0.119193, 0.950227)   # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.240479, -1.537150, -0.498535)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.969256, 1.875992, 0.041556)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.055648, -0.204043, 1.057311)   # Coefficients for linear Blue component calculation

# CIELUV Constants (Source: CIELUV 1976 / CIE 15:2004)
LUV_EPSILON = (6.0 / 29.0) ** 3    # Y ratio threshold between the cube-root and linear L* segments
LUV_KAPPA = (29.0 / 3.0) ** 3      # Slope of the linear L* segment
LUV_L_THR = 8.0                    # EPSILON * KAPPA, the same threshold expressed in L*
LUV_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LUV_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LUV_U_V_MULT = 13.0                # Multiplier for 'u' and 'v' chromaticity coordinates
LUV_U_NUM = 4.0                    # Numerator coefficient for u' chromaticity calculation
LUV_V_NUM = 9.0                    # Numerator coefficient for v' chromaticity calculation
LUV_DENOM_Y = 15.0                 # Y-coefficient for the denominator in chromaticity formulas
LUV_DENOM_Z = 3.0                  # Z-coefficient for the denominator in chromaticity formulas
LUV_INV_U_MULT = 52.0              # 4 * 13, u-equation factor of the inverse transform
LUV_INV_V_MULT = 39.0              # 3 * 13, v-equation factor of the inverse transform
LUV_INV_Y_MULT = 5.0               # Y factor of the inverse transform's linear system

# WCAG Contrast (Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
DARK_THRESHOLD = 0.5               # Backgrounds below this luminance are treated as dark

# Color Vision Deficiency Simulation (Source: Fidaner, Lin & Ozguven, LMS daltonization)
M_RGB_LMS_L = (17.8824, 43.5161, 4.11935)                   # RGB -> L cone response
M_RGB_LMS_M = (3.45565, 27.1554, 3.86714)                   # RGB -> M cone response
M_RGB_LMS_S = (0.0299566, 0.184309, 1.46709)                # RGB -> S cone response
M_LMS_RGB_R = (0.0809444479, -0.130504409, 0.116721066)     # LMS -> Red
M_LMS_RGB_G = (-0.0102485335, 0.0540193266, -0.113614708)   # LMS -> Green
M_LMS_RGB_B = (-0.000365296938, -0.00412161469, 0.693511405)  # LMS -> Blue

# Error redistribution toward the visible spectrum (rows: R, G, B; columns: eR, eG, eB)
M_CVD_ERROR = (
    (0.0, 0.0, 0.0),
    (0.7, 1.0, 0.0),
    (0.7, 0.0, 1.0),
)

CVD_MATRICES = {
    "protanope": (       # reds are greatly reduced (1% men)
        0.0, 2.02344, -2.52581,
        0.0, 1.0, 0.0,
        0.0, 0.0, 1.0,
    ),
    "deuteranope": (     # greens are greatly reduced (1% men)
        1.0, 0.0, 0.0,
        0.494207, 0.0, 1.24827,
        0.0, 0.0, 1.0,
    ),
    "tritanope": (       # blues are greatly reduced (0.003% population)
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        -0.395913, 0.801109, 0.0,
    ),
}

# ==========================================
# Contrast Adjuster Defaults & Limits
# ==========================================

DEFAULT_BASE = "#232323"           # Default background the adjuster targets
DEFAULT_CONTRAST = WCAG_AA_NORMAL  # Default contrast ratio
DEFAULT_MODE = 0                   # Passthrough

BISECTION_PRECISION = 1.0 / 65536  # Stop halving once the lightness interval is this narrow
BISECTION_MAX_ITERATIONS = 64      # Upper bound on lightness bisection steps
SATURATION_CURVE_EXP = 7           # Exponent of the saturation compensation curve

HSL_LOOP_Y_THRESHOLD = 0.5         # Y' the HSL loop pushes past
HSL_LOOP_DARK_OFFSET = 0.1         # l' = 0.1 + 0.9 * l on dark backgrounds
HSL_LOOP_FACTOR = 0.9              # l' = 0.9 * l on light backgrounds
MAX_STEPS = 1000                   # Iteration safety limit to prevent infinite loops

RGB_LOOP_DARK_MIN_LUM = 0.15       # Stop brightening once luminance reaches this
RGB_LOOP_LIGHT_MAX_LUM = 0.3       # Stop darkening once luminance falls to this
BRIGHTEN_LOOP_LIMIT = 127          # Upper bound on brighten/darken steps
BRIGHTEN_DEFAULT_AMOUNT = 1        # Percent of 255 added per brighten step
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to decimal factors

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Output formats for the 'convert' command
FORMAT_ALIASES = {
    'hex': 'hex',
    'css': 'css',
    'rgb': 'rgb',
    'rgba': 'rgb',
    'hsv': 'hsv',
    'hsva': 'hsv',
    'hsl': 'hsl',
    'hsla': 'hsl',
    'xyz': 'xyz',
    'luv': 'luv',
}

# Names accepted by the adjuster's --mode flag
MODE_ALIASES = {
    'disabled': -1,
    'passthrough': 0,
    'hsl-luma': 1,
    'luv': 2,
    'hsl-loop': 3,
    'rgb-loop': 4,
}

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
