"""Portfolio analytics for best-ball draft pick exports."""
