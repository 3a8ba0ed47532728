"""Protocol surfaces that expose the gateway to tool hosts."""
