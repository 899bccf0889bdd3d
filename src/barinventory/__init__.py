"""Bar inventory: sorted entity lists kept in sync with their rendered views."""
