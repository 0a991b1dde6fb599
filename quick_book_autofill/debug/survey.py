"""Page survey for diagnosing markup drift

Reports how many live elements each tier of every named chain matches, so a
site redesign shows up as tiers dropping to zero.
"""

from quick_book_autofill.data import irctc_markup as markup
from quick_book_autofill.perception.resolver import candidates


def survey_page(page, chains=None):
    """
    Count matches per tier.
    Returns list of (chain_name, tier_number, lookup_description, count) tuples.
    """
    chains = chains or markup.CHAINS
    rows = []
    for name, chain in chains.items():
        for tier, lookup in enumerate(chain, 1):
            rows.append((name, tier, lookup.describe(), len(candidates(page, lookup))))
    return rows


def print_survey(page, chains=None):
    print("\n" + "=" * 80)
    print("PASSENGER PAGE MARKUP SURVEY")
    print("=" * 80)
    print(f"URL: {page.url}\n")

    current = None
    for name, tier, description, count in survey_page(page, chains):
        if name != current:
            print(f"{name}:")
            current = name
        marker = "🎯" if count else "  "
        print(f"  {marker} tier {tier}: {count:>3}  {description}")
