AUTO = "AUTO_1234"
"""
This is used with discovered subclasses, to assign a __discriminator__ based on the class name.
(Prefer explicit discriminators for anything persisted, as class names are not stable across refactors.)
"""
