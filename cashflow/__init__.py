# CashFlowMin - expense tracking and budget split
