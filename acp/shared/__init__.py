"""Cross-cutting helpers shared by application and infrastructure layers."""
