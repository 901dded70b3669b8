"""Command-line front-ends for Guiñote."""
