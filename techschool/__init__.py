"""Course catalog service: YouTube courses tagged by language, framework, tool and fundamentals."""
