"""HTTP surface for the Meal Dictator skill."""
