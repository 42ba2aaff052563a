"""
Token creator task collection.

Usage from a project root:

    # tasks.py
    from token_creator.tasks import namespace
"""

from invoke import Collection

from token_creator.build.tasks import serve, token

namespace = Collection()

for submodule in [token, serve]:
    submodule_collection = Collection.from_module(submodule)
    for task_name, task in submodule_collection.tasks.items():
        namespace.add_task(task)
