from .host_facts import collect_host_facts, host_facts_to_dict
from .line_copy import copy_lines

__all__ = ["collect_host_facts", "copy_lines", "host_facts_to_dict"]
