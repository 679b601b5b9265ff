"""
Configuration file for the word cloud builder.
Modify this file to customize the builder's behavior.
"""

# Tokenizer configuration
TOKENIZER_CONFIG = {
    "case_sensitive": False,  # Whether "Cloud" and "cloud" count separately
    "min_word_length": 2,  # Tokens shorter than this are dropped
    # Characters that separate words
    "delimiters": [
        " ",
        "\t",
        "\n",
        "\r",
        "\f",
        "\v",
        ".",
        ",",
        ";",
        ":",
        "!",
        "?",
        '"',
        "(",
        ")",
        "[",
        "]",
        "{",
        "}",
        "<",
        ">",
        "/",
        "\\",
        "|",
        "*",
        "+",
        "=",
        "&",
        "^",
        "%",
        "$",
        "#",
        "@",
        "~",
        "`",
    ],
    "strip_chars": "'_",  # Stripped from both ends of each token
    "stop_words": [
        "a", "about", "above", "after", "again", "against", "all", "am", "an",
        "and", "any", "are", "aren't", "as", "at", "be", "because", "been",
        "before", "being", "below", "between", "both", "but", "by", "can",
        "can't", "cannot", "could", "couldn't", "did", "didn't", "do", "does",
        "doesn't", "doing", "don't", "down", "during", "each", "few", "for",
        "from", "further", "had", "hadn't", "has", "hasn't", "have", "haven't",
        "having", "he", "he'd", "he'll", "he's", "her", "here", "here's",
        "hers", "herself", "him", "himself", "his", "how", "how's", "i",
        "i'd", "i'll", "i'm", "i've", "if", "in", "into", "is", "isn't", "it",
        "it's", "its", "itself", "just", "let's", "me", "more", "most",
        "mustn't", "my", "myself", "no", "nor", "not", "now", "of", "off",
        "on", "once", "only", "or", "other", "ought", "our", "ours",
        "ourselves", "out", "over", "own", "same", "shan't", "she", "she'd",
        "she'll", "she's", "should", "shouldn't", "so", "some", "such",
        "than", "that", "that's", "the", "their", "theirs", "them",
        "themselves", "then", "there", "there's", "these", "they", "they'd",
        "they'll", "they're", "they've", "this", "those", "through", "to",
        "too", "under", "until", "up", "upon", "very", "was", "wasn't", "we",
        "we'd", "we'll", "we're", "we've", "were", "weren't", "what",
        "what's", "when", "when's", "where", "where's", "which", "while",
        "who", "who's", "whom", "why", "why's", "will", "with", "won't",
        "would", "wouldn't", "you", "you'd", "you'll", "you're", "you've",
        "your", "yours", "yourself", "yourselves",
    ],
}

# Layout configuration
LAYOUT_CONFIG = {
    "default_width": 3840,  # 4K canvas
    "default_height": 2160,
    "max_unique_words": 100,  # Words kept after ranking
    "max_unique_words_range": (10, 500),  # Accepted on the command line
    "min_font_size": 8,  # Words sized below this are dropped
    "distance_step": 5,  # Radius growth per failed ring, in tenths of a word width
    "radial_granularity": 15,  # Candidate density per ring
    "rotation_probability": 0.35,  # Chance that a word is drawn vertically
    "allow_rotation": True,
    "scan_carry_divisor": 3,  # Previous word's scan count / this = next starting radius
}

# Color configuration
COLOR_CONFIG = {
    "background": "black",
    "max_colors": 256,
    "min_saturation": 0.5,  # Washed-out colors are dropped
    "monochrome_min_saturation": 0.0,
    "saturation_floor": 0.01,  # Keeps the sort weight finite for pure hues
    "colors": None,  # None means every named CSS4 color
}

# Render configuration
RENDER_CONFIG = {
    "font_family": "DejaVuSans.ttf",
    "font_style": "regular",
    "fallback_fonts": [
        "DejaVuSans.ttf",
        "LiberationSans-Regular.ttf",
        "arial.ttf",
        "Arial.ttf",
    ],
    "default_format": "png",
    "formats": {
        ".png": "png",
        ".jpg": "jpeg",
        ".jpeg": "jpeg",
        ".bmp": "bmp",
        ".gif": "gif",
        ".tif": "tiff",
        ".tiff": "tiff",
        ".webp": "webp",
    },
}

# Output configuration
OUTPUT_CONFIG = {
    "timing_info": True,  # Show execution time
    "verbose": True,  # Show detailed progress information
}
