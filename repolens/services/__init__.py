"""Engine services: manifest parsing, sampling, classification."""
