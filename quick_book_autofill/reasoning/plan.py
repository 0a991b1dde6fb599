"""Pipeline planning helpers"""


def growth_needed(required, existing):
    """How many repeated sub-forms to add: max(0, required - existing)"""
    required = max(required, 0)
    return max(0, required - max(existing, 0))


def fillable_count(requested, available):
    return max(0, min(requested, available))
