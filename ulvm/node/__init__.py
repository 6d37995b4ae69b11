"""Node.js release listing, installation, selection and removal."""