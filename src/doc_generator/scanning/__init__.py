"""Bounded line scanners: comment blocks, locator, annotations and signatures."""
