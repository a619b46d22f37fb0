"""
Study: Two Colonies

Two colonies of different species, each with a queen and a single
worker, draw from their own larders until neither can stand.

Questions to explore:
- How long does a larder last for a given roster size?
- Which colony falls first, and does anyone outlast the other?
"""
