"""
Token creator tasks package.

Modules are collected by token_creator/tasks.py using Collection.from_module().
"""
