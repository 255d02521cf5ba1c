"""
Pattern Table - Keyword-triggered guidance for common UI patterns.

Keys are matched as substrings of the lowercased description, in the
order listed here.
"""

from __future__ import annotations

from .models import PatternSuggestion

__all__ = ["GENERAL_GUIDANCE", "PATTERNS"]

PATTERNS: dict[str, PatternSuggestion] = {
    "form": PatternSuggestion(
        spacing=["LubaSpacing.sm (8pt) between fields", "LubaSpacing.lg (16pt) section gaps"],
        colors=[
            "LubaColors.surface for field background",
            "LubaColors.border for field borders",
            "LubaColors.error for validation",
        ],
        radius=["LubaRadius.md (12pt) for fields"],
        typography=[
            "LubaTypography.body for field text",
            "LubaTypography.caption for helper text",
            "LubaTypography.button for submit",
        ],
        components=["LubaTextField", "LubaTextArea", "LubaCheckbox", "LubaRadio", "LubaToggle", "LubaButton"],
    ),
    "notification": PatternSuggestion(
        spacing=["LubaSpacing.md (12pt) internal padding", "LubaSpacing.lg (16pt) horizontal padding"],
        colors=["LubaColors.success/warning/error for status", "LubaColors.surface for background"],
        radius=["LubaRadius.md (12pt) for toast/alert"],
        typography=["LubaTypography.subheadline for message", "LubaTypography.buttonSmall for action"],
        components=["LubaToast", "LubaAlert"],
        primitives=["lubaGlass for frosted effect"],
    ),
    "banner": PatternSuggestion(
        spacing=["LubaSpacing.md (12pt) vertical padding", "LubaSpacing.lg (16pt) horizontal padding"],
        colors=["LubaColors.success/warning/error for status", "LubaColors.surface for background"],
        radius=["LubaRadius.md (12pt)"],
        typography=["LubaTypography.headline for title", "LubaTypography.body for message"],
        components=["LubaAlert"],
        primitives=["lubaGlass for frosted effect"],
    ),
    "card": PatternSuggestion(
        spacing=["LubaSpacing.lg (16pt) card padding", "LubaSpacing.sm (8pt) content gaps"],
        colors=[
            "LubaColors.surface for background",
            "LubaColors.textPrimary for title",
            "LubaColors.textSecondary for description",
        ],
        radius=["LubaRadius.md (12pt) card corners"],
        typography=[
            "LubaTypography.headline for title",
            "LubaTypography.body for content",
            "LubaTypography.caption for metadata",
        ],
        components=["LubaCard"],
        primitives=[
            "lubaPressable for tappable cards",
            "lubaExpandable for expandable cards",
            "lubaGlass for glass cards",
        ],
    ),
    "list": PatternSuggestion(
        spacing=["LubaSpacing.sm (8pt) between items", "LubaSpacing.lg (16pt) row padding"],
        colors=["LubaColors.surface for row background", "LubaColors.border for separators"],
        radius=["LubaRadius.md (12pt) for row cards"],
        typography=["LubaTypography.body for primary text", "LubaTypography.bodySmall for secondary"],
        components=["LubaCard", "LubaDivider", "LubaAvatar"],
        primitives=["lubaSwipeable for swipe actions", "lubaPressable for tap actions"],
    ),
    "loading": PatternSuggestion(
        spacing=["LubaSpacing.md (12pt) around loading indicators"],
        colors=["LubaColors.accent for active indicators", "LubaColors.gray200 for tracks"],
        radius=["LubaRadius.xs (4pt) for skeleton elements"],
        typography=["LubaTypography.caption for loading labels"],
        components=["LubaSpinner", "LubaProgressBar", "LubaCircularProgress", "LubaSkeleton"],
        primitives=["lubaShimmerable for shimmer effect"],
    ),
    "navigation": PatternSuggestion(
        spacing=["LubaSpacing.lg (16pt) tab padding", "LubaSpacing.xs (4pt) icon-label gap"],
        colors=["LubaColors.accent for selected", "LubaColors.textSecondary for unselected"],
        radius=["LubaRadius.sm (8pt) for tab indicators"],
        typography=["LubaTypography.footnote for tab labels"],
        components=["LubaTabs", "LubaSearchBar"],
        primitives=["lubaGlass for glass tab bar"],
    ),
    "profile": PatternSuggestion(
        spacing=["LubaSpacing.lg (16pt) between elements", "LubaSpacing.xl (24pt) section gaps"],
        colors=[
            "LubaColors.surface for card",
            "LubaColors.textPrimary for name",
            "LubaColors.textSecondary for details",
        ],
        radius=["LubaRadius.full (9999) for avatar"],
        typography=[
            "LubaTypography.title2 for name",
            "LubaTypography.body for details",
            "LubaTypography.caption for metadata",
        ],
        components=["LubaAvatar", "LubaCard", "LubaBadge", "LubaButton"],
    ),
    "modal": PatternSuggestion(
        spacing=["LubaSpacing.lg (16pt) header/content padding", "LubaSpacing.xl (24pt) between sections"],
        colors=["LubaColors.surface for background", "LubaColors.textPrimary for title"],
        radius=["LubaRadius.lg (16pt) for sheet corners"],
        typography=["LubaTypography.title3 for sheet title", "LubaTypography.body for content"],
        components=["LubaSheet", "LubaButton"],
        primitives=["lubaGlass for glass header"],
    ),
    "settings": PatternSuggestion(
        spacing=["LubaSpacing.lg (16pt) row padding", "LubaSpacing.sm (8pt) label-control gap"],
        colors=["LubaColors.surface for rows", "LubaColors.textPrimary for labels"],
        radius=["LubaRadius.md (12pt) for grouped sections"],
        typography=["LubaTypography.body for labels", "LubaTypography.bodySmall for descriptions"],
        components=["LubaToggle", "LubaSlider", "LubaStepper", "LubaCard", "LubaDivider"],
        primitives=["lubaExpandable for expandable settings"],
    ),
}

GENERAL_GUIDANCE: dict[str, str] = {
    "spacing": (
        "Use LubaSpacing tokens (xs=4, sm=8, md=12, lg=16, xl=24, xxl=32, xxxl=48, huge=64). "
        "All on the 4pt grid."
    ),
    "colors": (
        "Use LubaColors semantic tokens. textPrimary for main text, textSecondary for descriptions, "
        "accent for interactive, surface for backgrounds."
    ),
    "radius": (
        "Use LubaRadius tokens (none=0, xs=4, sm=8, md=12, lg=16, xl=24, full=9999). "
        "md is the most common for components."
    ),
    "typography": (
        "Use LubaTypography tokens. headline for titles, body for content, caption for metadata, "
        "button for actions."
    ),
}
