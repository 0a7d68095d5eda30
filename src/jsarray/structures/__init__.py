from .sequences import MutableSequenceMixin as MutableSequenceMixin
