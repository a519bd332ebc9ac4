"""Open the colorramp demo window with the default strips."""

import logging

import colorramp as cr
from colorramp.demo import DemoConfig, default_strips

logging.basicConfig(level=logging.INFO)

config = DemoConfig()
for strip in default_strips(config):
    print(strip.label)
print("Opening demo window...")

cr.show_demo(config)
