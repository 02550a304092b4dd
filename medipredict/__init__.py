"""MediPredict — monthly hospital case forecasting client."""
