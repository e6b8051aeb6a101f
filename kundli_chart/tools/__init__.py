# Kundli Chart - Orchestration and input helpers
