"""HTTP surface for json2sections."""
