# Built-in word list for memorable passwords.
# Lowercase, letters only, 4-8 characters, no duplicates.

WORDS = (
    "acorn", "admiral", "almond", "amber", "anchor", "antler", "apple", "apron",
    "arcade", "arrow", "aspen", "atlas", "autumn", "avocado", "azure", "badge",
    "bagel", "bakery", "bamboo", "banjo", "barley", "basket", "beacon", "beaver",
    "berry", "bison", "blanket", "blossom", "bonfire", "bramble", "breeze", "brick",
    "bridge", "bucket", "buffalo", "cabin", "cactus", "camel", "candle", "canoe",
    "canyon", "captain", "carbon", "carpet", "castle", "cedar", "cellar", "cherry",
    "chimney", "cinnamon", "circus", "citrus", "clover", "cobalt", "cocoa", "comet",
    "compass", "copper", "coral", "cotton", "cougar", "crater", "crayon", "cricket",
    "crimson", "crystal", "cupcake", "dagger", "daisy", "dancer", "delta", "desert",
    "dolphin", "domino", "dragon", "drizzle", "eagle", "echo", "eclipse", "ember",
    "emerald", "engine", "falcon", "feather", "fennel", "ferret", "fiddle", "fjord",
    "flannel", "flint", "forest", "fossil", "fountain", "galaxy", "garden", "garlic",
    "gazelle", "geyser", "ginger", "glacier", "goblet", "granite", "gravel", "guitar",
    "hammock", "harbor", "harvest", "hazel", "helmet", "heron", "hickory", "honey",
    "horizon", "husky", "igloo", "indigo", "island", "ivory", "jackal", "jasmine",
    "jigsaw", "jungle", "juniper", "kayak", "kettle", "kitten", "koala", "ladder",
    "lagoon", "lantern", "lemon", "lilac", "linen", "lizard", "lobster", "locket",
    "lotus", "lumber", "magnet", "mango", "maple", "marble", "meadow", "meteor",
    "mitten", "monsoon", "mosaic", "muffin", "mustard", "nectar", "needle", "nickel",
    "nutmeg", "oasis", "ocean", "octopus", "olive", "onyx", "orbit", "orchid",
    "otter", "oyster", "paddle", "panda", "papaya", "parrot", "pebble", "pelican",
    "pepper", "piano", "pickle", "pigeon", "pillow", "pirate", "planet", "pocket",
    "pollen", "poppy", "prairie", "pretzel", "puffin", "pumpkin", "puzzle", "quartz",
    "quiver", "rabbit", "radar", "raisin", "raven", "ribbon", "river", "rocket",
    "saddle", "saffron", "salmon", "sapphire", "satchel", "scarlet", "shadow", "shovel",
    "silver", "skylark", "sled", "sparrow", "spruce", "squirrel", "summit", "sunset",
    "tadpole", "tango", "teapot", "thistle", "thunder", "tiger", "timber", "toffee",
    "topaz", "torch", "tractor", "trumpet", "tulip", "tundra", "turtle", "umbrella",
    "valley", "vanilla", "velvet", "violet", "volcano", "voyage", "wagon", "walnut",
    "walrus", "willow", "window", "winter", "wizard", "yarrow", "yogurt", "zephyr",
)
