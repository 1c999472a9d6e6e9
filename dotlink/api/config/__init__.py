"""Config module - dotlink configuration loading and saving."""
