"""SpeciesGate: confidence-gated adapter for a remote animal classification server."""
