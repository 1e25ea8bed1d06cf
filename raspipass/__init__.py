"""
RaspiPass configuration page.

Renders the RaspiPass Configuration Page from Jinja2 templates, served
through a small Flask web front-end on the Raspberry Pi.
"""

__version__ = "1.0.0"
