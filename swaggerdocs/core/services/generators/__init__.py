"""
Generators — produce Go source artifacts from documentation records.

Each generator returns the artifact content; writing it is left to the
caller (``artifact_ops.write_generated_file``).
"""
