"""
Per-resource endpoint wrappers.

One async function per backend endpoint. Wrappers only describe the call
(path, method, payload); envelope handling and failures belong to the
transport client.
"""
