"""Extract translatable strings from JavaScript sources into a POT catalog."""
