"""Minimal Tkinter window that shows a processed image 1:1.

Uses Pillow's ``ImageTk`` to hand the NumPy array to Tk; no scaling or
colour conversion is applied.
"""
from __future__ import annotations

import tkinter as tk

import numpy as np
from PIL import Image, ImageTk


def _to_pil(arr: np.ndarray) -> Image.Image:
    return Image.fromarray(arr)


def show_image(arr: np.ndarray, title: str = "Processed Image") -> None:
    """Open a window showing ``arr`` and block until it is closed."""
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")

    root = tk.Tk()
    root.title(title)
    imgtk = ImageTk.PhotoImage(_to_pil(arr))
    label = tk.Label(root, image=imgtk, borderwidth=0)
    label.image = imgtk  # keep reference to prevent GC
    label.pack()
    root.resizable(False, False)
    root.mainloop()
