"""Json flavor of the CMap chart asset, as exported by Unity asset
extraction tools. Lanes are objects holding a list of note objects, note
types and region modes are integer codes"""

from .load import load_cmap_json, parse_json
