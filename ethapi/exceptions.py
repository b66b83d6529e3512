class DescriptorError(ValueError):
    """A method or property descriptor violates the table's invariants"""


class InvalidDescriptorError(DescriptorError):
    pass


class DuplicateDescriptorError(DescriptorError):
    def __init__(self, name: str, table: str):
        super().__init__(f"'{name}' is declared more than once in the {table} table")
        self.name = name
        self.table = table
