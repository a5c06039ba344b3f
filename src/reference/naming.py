from src.models.country import NamingRules

# Kinyarwanda prefixes are stripped before the English ones, suffixes last.
NAMING_RULES = {
    "rw": NamingRules(
        locale="rw",
        prefixes=(
            r"Akarere ka|Umurenge wa?'?|Intara ya?'?",
            r"District of|Sector of|Province of",
        ),
        suffixes=("District", "Sector", "Province", "City"),
    ),
}
