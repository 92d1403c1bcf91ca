"""Examples of using typed_template library.

This file demonstrates various use cases:
1. Basic usage with defaults
2. Profile card with every placeholder kind
3. Named rendering with prepare()
4. Rendering a DataFrame
5. Handling missing values
"""

import pandas as pd

from typed_template import (
    MissingValue,
    Template,
    TemplateBatchRenderer,
    computed,
    cond,
    enumerated,
    lines,
    mapped,
    num,
    str_,
)


# =============================================================================
# Example 1: Basic Usage
# =============================================================================
def example_1_basic_usage():
    """Fill a single slot, or fall back to its default."""
    print("=" * 80)
    print("Example 1: Basic Usage")
    print("=" * 80)

    hello = Template.new("Hello ", str_("Template"), "!")

    print(hello.compile())
    print(hello.compile("World"))


# =============================================================================
# Example 2: Profile Card
# =============================================================================
PROFILE = Template.new(
    "Name: ", str_(), "\n",
    "Age: ", num(), "\n",
    "Gender: ", enumerated(("male", "female", "other", "no answer")), "\n",
    "Role: ", mapped({
        "admin": "Administrator",
        "staff": "Staff",
        "moderator": "Moderator",
        "member": "Member",
    }), "\n",
    "Rank: ", cond("premium", "regular"), " user\n",
    "Log:\n",
    lines(),
)


def example_2_profile_card():
    """Positional compile with one value per slot."""
    print("\n" + "=" * 80)
    print("Example 2: Profile Card")
    print("=" * 80)

    print(PROFILE.compile("Alice", 18, 1, "admin", True, ["signed in", "updated avatar"]))


# =============================================================================
# Example 3: Named Rendering
# =============================================================================
def example_3_prepare():
    """Address slots by name; repeated names share one value."""
    print("\n" + "=" * 80)
    print("Example 3: Named Rendering")
    print("=" * 80)

    render = PROFILE.prepare("name", "age", "gender", "role", "is_premium", "logs")
    print(render({
        "name": "Alice",
        "age": 18,
        "gender": 1,
        "role": "admin",
        "is_premium": True,
        "logs": [],
    }))

    warning = computed(lambda high: " Stay hydrated!" if high > 30 else "")
    forecast = Template.new(
        "Today is ", mapped({"sunny": "sunny", "cloudy": "cloudy", "rainy": "rainy"}),
        ", high ", num(), ", low ", num(), ".", warning,
    )
    render_forecast = forecast.prepare("weather", "high", "low", "high")
    print(render_forecast(weather="sunny", high=31, low=20))


# =============================================================================
# Example 4: Rendering a DataFrame
# =============================================================================
def example_4_dataframe():
    """One rendered string per row, columns matched to slot names."""
    print("\n" + "=" * 80)
    print("Example 4: Rendering a DataFrame")
    print("=" * 80)

    greeting = Template.new("Dear ", str_(), ", your order #", num(), " is ", str_("on its way"), ".")
    prepared = greeting.prepare("customer", "order_id", "status")

    df = pd.DataFrame({
        "customer": ["Alice", "Bob"],
        "order_id": [1001, 1002],
        "status": ["delivered", None],
    })
    result = TemplateBatchRenderer().render(df, prepared, output_column="message")

    for message in result["message"]:
        print(f"  {message}")


# =============================================================================
# Example 5: Missing Values
# =============================================================================
def example_5_missing_values():
    """A slot without value or default stops compilation."""
    print("\n" + "=" * 80)
    print("Example 5: Missing Values")
    print("=" * 80)

    try:
        PROFILE.compile("Alice", None, 1, "admin", True, [])
    except MissingValue as exc:
        print(f"Failed as expected: {exc} (slot {exc.index})")


if __name__ == "__main__":
    example_1_basic_usage()
    example_2_profile_card()
    example_3_prepare()
    example_4_dataframe()
    example_5_missing_values()
