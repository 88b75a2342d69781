"""Runtime services shared by the renderers."""
