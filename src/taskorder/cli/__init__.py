"""
taskorder CLI

Thin presentation layer over taskorder.core: reads task files, renders
execution orders and reports errors.
"""
