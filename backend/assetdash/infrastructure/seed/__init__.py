from .seed_loader import load_seed_file

__all__ = ["load_seed_file"]
