"""Reviews app package.

Star ratings (1 to 5) and comments left by users on listings, one per
user and listing, plus per-listing rating averages.
"""
