class OrgTreeError(RuntimeError):
    """Base error for anything that stops an org chart from being built."""


class CyclicHierarchyError(OrgTreeError):
    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f"cyclic hierarchy detected referencing id {node_id}")


class RecordLoadError(OrgTreeError):
    """Input table could not be turned into records."""
