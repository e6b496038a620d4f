"""Gradio front end for ProteinMaster."""
