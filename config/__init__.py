"""Configuration for bankdemo."""
