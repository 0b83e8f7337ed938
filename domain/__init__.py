"""Describes the city infos domain. Centres around the `RecipeRepository`.

Why is this hard?

- City and weather data live behind someone else's api. Nothing here knows
  whether a city exists until it asks.
- Recipes are the only state we own. Created once, never modified, deleted
  on request.
- Many requests can be in flight at once and they share the recipes.

Should be able to fake the api with a transport and never hit the network.
"""
