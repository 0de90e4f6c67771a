VERSION = "2026.10.16"
