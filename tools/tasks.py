from collections import namedtuple


Task = namedtuple("Task", ["name", "description", "action"])

TASKS = {}


class UnknownTaskError(KeyError):
    def __str__(self):
        return f"Task {self.args[0]} is not defined"


def task(name, description=""):
    """
    Register the decorated function as a named task.

    A later registration under the same name overrides the earlier one.
    """
    def decorator(action):
        TASKS[name] = Task(name, description, action)
        return action
    return decorator


def get_task(name):
    if name not in TASKS:
        raise UnknownTaskError(name)
    return TASKS[name]


def run_task(name, **kwargs):
    return get_task(name).action(**kwargs)
