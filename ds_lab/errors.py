# errors.py


class SimulationError(LookupError):
    """Base class for faults raised by the simulation entry points."""


class UnknownStructure(SimulationError):
    def __init__(self, structure_id):
        super().__init__(f"Unknown structure '{structure_id}'")
        self.structure_id = structure_id


class UnknownOperation(SimulationError):
    def __init__(self, structure_id, operation_id):
        super().__init__(f"Structure '{structure_id}' has no operation '{operation_id}'")
        self.structure_id = structure_id
        self.operation_id = operation_id


class TraceValidationError(ValueError):
    """A generated trace does not match the trace schema."""

    def __init__(self, message, path=()):
        super().__init__(message)
        self.path = list(path)
