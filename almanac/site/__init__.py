"""
Host-facing layer: collection registry, standard plugin configuration,
template filters, manifest loading and the command line.
"""
