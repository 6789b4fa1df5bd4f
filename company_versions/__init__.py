"""Company version log package.

Ensures the local ``company_versions`` package is resolved as a regular
package instead of a namespace package.
"""
